from .ticket import MalformedTicket, Ticket, decode, encode_unsigned, ticket_length

__all__ = ["MalformedTicket", "Ticket", "decode", "encode_unsigned", "ticket_length"]
