"""Client model."""

from dataclasses import dataclass


@dataclass
class Client:
    """Bank client.

    Accounts keep a reference to the same ``Client`` object, so one client
    can own several accounts and edits are visible through all of them.
    """

    name: str
    national_id: str  # CPF, XXX.XXX.XXX-XX
    phone: str
