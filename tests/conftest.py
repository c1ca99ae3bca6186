import pytest

from tests.sample_records import Car, State, Task


@pytest.fixture
def tasks() -> list[Task]:
    return [Task(1, State.DONE), Task(2, State.TODO), Task(3, State.DONE)]


@pytest.fixture
def cars() -> list[Car]:
    return [Car(make="Ford", year=2020), Car(make="Ford", year=2021)]
