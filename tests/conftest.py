#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Annotated

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from strify.formatters import configure
from strify.markers import DONT_RESOLVE, EXCLUDE


# Classes --------------------------------------------------------------------------------------------------------------

class Address:
    """A simple address; resident points back to a Person."""
    street: str
    city: str
    zip: str
    resident: "Person | None"

    def __init__(self, street: str, city: str, zip: str) -> None:
        self.street = street
        self.city = city
        self.zip = zip
        self.resident = None


class Person:
    """A person with an excluded age and a summarized address history."""
    name: str
    age: Annotated[int, EXCLUDE]
    address: Address
    addresses_old: Annotated[list[Address], DONT_RESOLVE]

    def __init__(self, name: str, age: int, address: Address, addresses_old: list[Address]) -> None:
        self.name = name
        self.age = age
        self.address = address
        self.addresses_old = addresses_old


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def address() -> Address:
    return Address("123 Main St", "Anytown", "12345")


@pytest.fixture
def person(address) -> Person:
    """Person whose address refers back to the person."""
    addresses_old = [Address("123 Main St", "Anytown", "12345")]
    person = Person("John Doe", 30, address, addresses_old)
    address.resident = person
    return person


@pytest.fixture(autouse=True)
def default_options():
    """Restore module-level strify defaults after every test."""
    yield
    configure(preset="summary")
