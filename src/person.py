"""A person with an age, a friend list and hobbies."""

ADULT_AGE = 18


class Person:
    def __init__(self, first_name: str, last_name: str, age: int = 0):
        self.first_name = first_name
        self.last_name = last_name
        self.age = age
        self._friends: list["Person"] = []
        self._hobbies: list[str] = []

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}.{self.last_name[:1]}."

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        if value < 0:
            raise ValueError("Age cannot be negative")
        self._age = value

    def is_adult(self) -> bool:
        return self._age >= ADULT_AGE

    # Friends are compared by identity, two people with the same name are
    # still different friends.

    def add_friend(self, friend: "Person") -> None:
        """Add friend to the friend list; adding an existing friend is a no-op.

        Raises TypeError if friend is not a Person and ValueError if it is
        this person.
        """
        if not isinstance(friend, Person):
            raise TypeError("Friend must be a Person instance")
        if friend is self:
            raise ValueError("Cannot add yourself as a friend")
        if not self.is_friend(friend):
            self._friends.append(friend)

    def remove_friend(self, friend: "Person") -> None:
        self._friends = [f for f in self._friends if f is not friend]

    def get_friends(self) -> list["Person"]:
        return list(self._friends)

    @property
    def friend_count(self) -> int:
        return len(self._friends)

    def is_friend(self, person: object) -> bool:
        return any(f is person for f in self._friends)

    def add_hobby(self, hobby: str) -> None:
        """Add a hobby, stripped of surrounding whitespace. Duplicates are ignored."""
        if not isinstance(hobby, str) or not hobby.strip():
            raise ValueError("Hobby must be a non-empty string")
        hobby = hobby.strip()
        if hobby not in self._hobbies:
            self._hobbies.append(hobby)

    def remove_hobby(self, hobby: str) -> None:
        if hobby in self._hobbies:
            self._hobbies.remove(hobby)

    def get_hobbies(self) -> list[str]:
        return list(self._hobbies)

    def has_hobby(self, hobby: str) -> bool:
        return hobby in self._hobbies

    def greet(self, person: object) -> str:
        if not isinstance(person, Person):
            return "Hello, stranger!"
        if self.is_friend(person):
            return f"Hey {person.first_name}! How are you doing?"
        return f"Hello, {person.full_name}. Nice to meet you!"

    def introduce(self) -> str:
        intro = f"Hi, I'm {self.full_name}"
        if self._age > 0:
            intro += f" and I'm {self._age} years old"
        if self._hobbies:
            intro += f". I enjoy {', '.join(self._hobbies)}"
        return intro + "."

    def __str__(self) -> str:
        return f"Person: {self.full_name}, Age: {self._age}"
