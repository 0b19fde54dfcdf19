from registrations.stores.django_store import DjangoEnrollmentStore, DjangoTicketStore
from registrations.stores.interfaces import EnrollmentStore, TicketStore

__all__ = [
    "EnrollmentStore",
    "TicketStore",
    "DjangoEnrollmentStore",
    "DjangoTicketStore",
]
