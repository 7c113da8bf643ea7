"""Application layer ports"""

from src.service.ticket.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticket.app.interface.i_mail_sender import IMailSender
from src.service.ticket.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticket.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = ['IEventQueryRepo', 'IMailSender', 'ITicketRepo', 'IUserQueryRepo']
