"""
seeded test data. every call with the same seed returns the same records.
"""
from collections import namedtuple
from typing import List
from faker import Faker

Person = namedtuple('Person', ['id', 'name', 'age', 'city', 'salary'])
Order = namedtuple('Order', ['id', 'person_id', 'product', 'amount'])

CITIES = ['oslo', 'lima', 'kyoto', 'quito']
PRODUCTS = ['lamp', 'desk', 'chair', 'shelf', 'rug']


def _faker(seed: int) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def make_people(count: int = 40, seed: int = 7) -> List[Person]:
    fake = _faker(seed)
    return [
        Person(
            id=i,
            name=fake.first_name().lower(),
            age=fake.random_int(min=18, max=70),
            city=fake.random_element(CITIES),
            salary=fake.random_int(min=20000, max=120000, step=500),
        )
        for i in range(count)
    ]


def make_orders(people: List[Person], count: int = 80, seed: int = 11) -> List[Order]:
    """orders reference existing people, some people end up without orders"""
    fake = _faker(seed)
    buyers = [p.id for p in people[: max(len(people) * 3 // 4, 1)]]
    return [
        Order(
            id=i,
            person_id=fake.random_element(buyers),
            product=fake.random_element(PRODUCTS),
            amount=fake.random_int(min=1, max=500),
        )
        for i in range(count)
    ]


people = make_people()
orders = make_orders(people)
numbers = list(range(1, 11))
