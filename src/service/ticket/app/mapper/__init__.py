from src.service.ticket.app.mapper.ticket_record_mapper import TicketDefaults, TicketRecordMapper

__all__ = ['TicketDefaults', 'TicketRecordMapper']
