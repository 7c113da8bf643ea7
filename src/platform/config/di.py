"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticket.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.ticket.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.ticket.app.command.delete_ticket_use_case import DeleteTicketUseCase
from src.service.ticket.app.command.generate_ticket_artifact_use_case import (
    GenerateTicketArtifactUseCase,
)
from src.service.ticket.app.command.send_ticket_by_email_use_case import (
    SendTicketByEmailUseCase,
)
from src.service.ticket.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.ticket.app.command.validate_ticket_use_case import ValidateTicketUseCase
from src.service.ticket.app.mapper.ticket_record_mapper import TicketDefaults, TicketRecordMapper
from src.service.ticket.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticket.app.query.list_tickets_by_reference_use_case import (
    ListTicketsByEventUseCase,
    ListTicketsByStatusUseCase,
    ListTicketsByTypeUseCase,
    ListTicketsByUserUseCase,
)
from src.service.ticket.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.ticket.app.query.search_tickets_use_case import (
    SearchTicketsByTextUseCase,
    SearchTicketsUseCase,
)
from src.service.ticket.app.service.pagination_aggregator import (
    PaginationAggregator,
    PaginationDefaults,
)
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.driven_adapter.mail.mock_mail_sender_impl import MockMailSenderImpl
from src.service.ticket.driven_adapter.repo.in_memory_event_query_repo_impl import (
    InMemoryEventQueryRepoImpl,
)
from src.service.ticket.driven_adapter.repo.in_memory_ticket_repo_impl import (
    InMemoryTicketRepoImpl,
)
from src.service.ticket.driven_adapter.repo.in_memory_user_query_repo_impl import (
    InMemoryUserQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Default policies (passed explicitly, never read from globals by the translator)
    ticket_defaults = providers.Singleton(TicketDefaults.from_settings, config=config_service)
    pagination_defaults = providers.Singleton(
        PaginationDefaults.from_settings, config=config_service
    )

    # Driven adapters
    ticket_repo = providers.Singleton(
        InMemoryTicketRepoImpl, pagination_defaults=pagination_defaults
    )
    event_query_repo = providers.Singleton(InMemoryEventQueryRepoImpl)
    user_query_repo = providers.Singleton(InMemoryUserQueryRepoImpl)
    mail_sender = providers.Singleton(MockMailSenderImpl)

    # Application services
    ticket_mapper = providers.Singleton(TicketRecordMapper, defaults=ticket_defaults)
    pagination_aggregator = providers.Singleton(
        PaginationAggregator, defaults=pagination_defaults
    )
    ticket_facade = providers.Singleton(
        TicketDataAccessFacade,
        ticket_repo=ticket_repo,
        mapper=ticket_mapper,
        pagination_aggregator=pagination_aggregator,
    )

    # Commands (fresh instance per invocation)
    create_ticket_use_case = providers.Factory(
        CreateTicketUseCase,
        ticket_facade=ticket_facade,
        code_prefix=config_service.provided.TICKET_CODE_PREFIX,
    )
    update_ticket_use_case = providers.Factory(UpdateTicketUseCase, ticket_facade=ticket_facade)
    delete_ticket_use_case = providers.Factory(DeleteTicketUseCase, ticket_facade=ticket_facade)
    cancel_ticket_use_case = providers.Factory(CancelTicketUseCase, ticket_facade=ticket_facade)
    validate_ticket_use_case = providers.Factory(
        ValidateTicketUseCase, ticket_facade=ticket_facade
    )
    generate_ticket_artifact_use_case = providers.Factory(
        GenerateTicketArtifactUseCase,
        ticket_facade=ticket_facade,
        event_query_repo=event_query_repo,
    )
    send_ticket_by_email_use_case = providers.Factory(
        SendTicketByEmailUseCase,
        ticket_facade=ticket_facade,
        event_query_repo=event_query_repo,
        user_query_repo=user_query_repo,
        mail_sender=mail_sender,
        artifact_generator=generate_ticket_artifact_use_case,
    )

    # Queries
    get_ticket_use_case = providers.Factory(GetTicketUseCase, ticket_facade=ticket_facade)
    list_tickets_use_case = providers.Factory(ListTicketsUseCase, ticket_facade=ticket_facade)
    list_tickets_by_event_use_case = providers.Factory(
        ListTicketsByEventUseCase, ticket_facade=ticket_facade
    )
    list_tickets_by_user_use_case = providers.Factory(
        ListTicketsByUserUseCase, ticket_facade=ticket_facade
    )
    list_tickets_by_status_use_case = providers.Factory(
        ListTicketsByStatusUseCase, ticket_facade=ticket_facade
    )
    list_tickets_by_type_use_case = providers.Factory(
        ListTicketsByTypeUseCase, ticket_facade=ticket_facade
    )
    search_tickets_use_case = providers.Factory(SearchTicketsUseCase, ticket_facade=ticket_facade)
    search_tickets_by_text_use_case = providers.Factory(
        SearchTicketsByTextUseCase, ticket_facade=ticket_facade
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
