from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str


def main():
    person = Person("John", "Doe")
    print(f"Hello {person.first_name} {person.last_name}!")


if __name__ == "__main__":
    main()
