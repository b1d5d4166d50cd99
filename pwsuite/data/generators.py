"""
Test-data generators.

``UserDataGenerator`` builds predictable-looking records from fixed word lists
and needs nothing beyond the standard library. ``FakerDataGenerator`` and
``SimpleFakerHelper`` produce realistic values through Faker.
"""

import random
import string
import time
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, TypeVar

from faker import Faker


T = TypeVar("T")

FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David",
    "Emily", "Robert", "Lisa", "William", "Emma",
    "James", "Olivia", "Daniel", "Sophia", "Matthew",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones",
    "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Anderson", "Taylor", "Thomas", "Moore", "Jackson",
]

# Indexes line up: a city is always paired with its own state and street
CITIES = ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix"]
STATES = ["NY", "CA", "IL", "TX", "AZ"]
STREETS = ["Main St", "Oak Ave", "Park Blvd", "Maple Dr", "Cedar Ln"]


@dataclass
class User:
    first_name: str
    last_name: str
    email: str
    username: str
    password: str
    age: int
    phone: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Address:
    street: str
    city: str
    state: str
    zip_code: str
    country: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UserProfile(User):
    address: Optional[Address] = None


@dataclass
class FakeUser:
    first_name: str
    last_name: str
    full_name: str
    email: str
    username: str
    password: str
    phone: str
    avatar: str
    date_of_birth: date
    age: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FakeAddress:
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    latitude: float
    longitude: float


@dataclass
class FakeCompany:
    name: str
    catch_phrase: str
    industry: str
    website: str
    email: str
    phone: str


@dataclass
class FakeProduct:
    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    in_stock: bool
    quantity: int


@dataclass
class FakeCreditCard:
    number: str
    cvv: str
    expiry_date: str
    card_type: str
    holder_name: str


@dataclass
class Employee:
    first_name: str
    middle_name: str
    last_name: str
    employee_id: str = field(default="")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class UserDataGenerator:
    """
    Generates random user data from fixed lists.

    Emails and usernames end with the last six digits of the current
    millisecond timestamp so values stay unique across a run.

    Example:
        generator = UserDataGenerator()
        user = generator.generate_user()
        user.email  # 'user_qwert_482913@test.com'
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _random_string(self, length: int) -> str:
        return "".join(self.rng.choice(string.ascii_lowercase) for _ in range(length))

    def _random_number(self, minimum: int, maximum: int) -> int:
        return self.rng.randint(minimum, maximum)

    @staticmethod
    def _timestamp() -> str:
        return str(int(time.time() * 1000))[-6:]

    def generate_first_name(self) -> str:
        return self.rng.choice(FIRST_NAMES)

    def generate_last_name(self) -> str:
        return self.rng.choice(LAST_NAMES)

    def generate_email(self, domain: str = "test.com") -> str:
        return f"user_{self._random_string(5)}_{self._timestamp()}@{domain}"

    def generate_username(self) -> str:
        return f"user_{self._random_string(4)}_{self._timestamp()}"

    def generate_password(self) -> str:
        """Password with upper and lower case letters, digits and symbols."""
        return f"Test@{self._timestamp()}!"

    def generate_phone(self) -> str:
        """Phone number formatted as ``(XXX) XXX-XXXX``."""
        area_code = self._random_number(100, 999)
        prefix = self._random_number(100, 999)
        line_number = self._random_number(1000, 9999)
        return f"({area_code}) {prefix}-{line_number}"

    def generate_age(self, min_age: int = 18, max_age: int = 80) -> int:
        return self._random_number(min_age, max_age)

    def generate_user(self) -> User:
        return User(
            first_name=self.generate_first_name(),
            last_name=self.generate_last_name(),
            email=self.generate_email(),
            username=self.generate_username(),
            password=self.generate_password(),
            age=self.generate_age(),
            phone=self.generate_phone(),
        )

    def generate_address(self) -> Address:
        index = self.rng.randrange(len(CITIES))
        return Address(
            street=f"{self._random_number(100, 9999)} {STREETS[index]}",
            city=CITIES[index],
            state=STATES[index],
            zip_code=str(self._random_number(10000, 99999)),
            country="USA",
        )

    def generate_user_profile(self) -> UserProfile:
        user = self.generate_user()
        return UserProfile(**asdict(user), address=self.generate_address())

    def generate_multiple_users(self, count: int) -> List[User]:
        return [self.generate_user() for _ in range(count)]


class FakerDataGenerator:
    """
    Wrapper around Faker for realistic test data.

    Args:
        locale: Faker locale such as ``en_US`` or ``de_DE``
        seed: Seed for reproducible output
    """

    def __init__(self, locale: str = "en_US", seed: Optional[int] = None):
        self.fake = Faker(locale)
        self._seed: Optional[int] = None
        if seed is not None:
            self.set_seed(seed)

    def set_locale(self, locale: str) -> None:
        """Switch the locale used for names, addresses and phone formats."""
        self.fake = Faker(locale)
        if self._seed is not None:
            self.fake.seed_instance(self._seed)

    def set_seed(self, seed: int) -> None:
        """Same seed, same data."""
        self._seed = seed
        self.fake.seed_instance(seed)

    def generate_user(self) -> FakeUser:
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()
        birth_date = self.fake.date_of_birth(minimum_age=18, maximum_age=65)
        today = date.today()
        age = today.year - birth_date.year - (
            (today.month, today.day) < (birth_date.month, birth_date.day)
        )

        return FakeUser(
            first_name=first_name,
            last_name=last_name,
            full_name=f"{first_name} {last_name}",
            email=f"{first_name}.{last_name}@{self.fake.free_email_domain()}".lower(),
            username=f"{first_name}{last_name}{self.fake.random_int(1, 99)}".lower(),
            password=self.generate_password(),
            phone=self.fake.phone_number(),
            avatar=self.fake.image_url(),
            date_of_birth=birth_date,
            age=age,
        )

    def generate_email(self, provider: Optional[str] = None) -> str:
        if provider:
            return self.fake.email(domain=provider)
        return self.fake.email()

    def generate_password(self, length: int = 12) -> str:
        return self.fake.password(
            length=length, special_chars=True, digits=True, upper_case=True, lower_case=True
        )

    def generate_address(self) -> FakeAddress:
        return FakeAddress(
            street=self.fake.street_address(),
            city=self.fake.city(),
            state=self.fake.state(),
            zip_code=self.fake.postcode(),
            country=self.fake.country(),
            latitude=float(self.fake.latitude()),
            longitude=float(self.fake.longitude()),
        )

    def generate_company(self) -> FakeCompany:
        return FakeCompany(
            name=self.fake.company(),
            catch_phrase=self.fake.catch_phrase(),
            industry=self.fake.bs(),
            website=self.fake.url(),
            email=self.fake.email(domain="company.com"),
            phone=self.fake.phone_number(),
        )

    def generate_product(self) -> FakeProduct:
        return FakeProduct(
            id=self.fake.uuid4(),
            name=f"{self.fake.color_name()} {self.fake.word().capitalize()}",
            description=self.fake.sentence(nb_words=12),
            price=round(self.fake.pyfloat(min_value=10, max_value=500, right_digits=2), 2),
            category=self.fake.word().capitalize(),
            image=self.fake.image_url(),
            in_stock=self.fake.pybool(),
            quantity=self.fake.random_int(0, 100),
        )

    def generate_products(self, count: int) -> List[FakeProduct]:
        return [self.generate_product() for _ in range(count)]

    def generate_credit_card(self) -> FakeCreditCard:
        """Fake card data; numbers pass Luhn checks but are not real cards."""
        month = self.fake.random_int(1, 12)
        year = self.fake.random_int(25, 30)
        return FakeCreditCard(
            number=self.fake.credit_card_number(),
            cvv=self.fake.credit_card_security_code(),
            expiry_date=f"{month:02d}/{year}",
            card_type=self.fake.credit_card_provider(),
            holder_name=self.fake.name(),
        )

    def generate_past_date(self, days: int = 30) -> datetime:
        return self.fake.date_time_between(start_date=f"-{days}d", end_date="now")

    def generate_future_date(self, days: int = 30) -> datetime:
        return self.fake.date_time_between(start_date="now", end_date=f"+{days}d")

    def generate_paragraph(self, sentences: int = 3) -> str:
        return self.fake.paragraph(nb_sentences=sentences, variable_nb_sentences=False)

    def generate_uuid(self) -> str:
        return self.fake.uuid4()

    def generate_number(self, minimum: int, maximum: int) -> int:
        return self.fake.random_int(minimum, maximum)

    def generate_boolean(self) -> bool:
        return self.fake.pybool()

    def generate_array(self, count: int, generator: Callable[[], T]) -> List[T]:
        return [generator() for _ in range(count)]

    def generate_employee(self) -> Employee:
        """Employee record for the OrangeHRM add-employee form."""
        return Employee(
            first_name=self.fake.first_name(),
            middle_name=self.fake.first_name(),
            last_name=self.fake.last_name(),
            employee_id=str(self.fake.random_int(1000, 9999)),
        )


class SimpleFakerHelper:
    """Minimal Faker helper: just names, email and phone."""

    def __init__(self, fake: Optional[Faker] = None):
        self.fake = fake or Faker()

    def get_first_name(self) -> str:
        return self.fake.first_name()

    def get_middle_name(self) -> str:
        # Faker has no middle-name provider; a second given name reads the same
        return self.fake.first_name()

    def get_last_name(self) -> str:
        return self.fake.last_name()

    def get_full_name(self) -> str:
        return self.fake.name()

    def get_email(self) -> str:
        return self.fake.email()

    def get_phone(self) -> str:
        return self.fake.phone_number()
