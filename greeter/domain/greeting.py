from dataclasses import dataclass

TEMPLATE = "Hello {name}!"


@dataclass(frozen=True)
class Greeting:
    message: str

    @classmethod
    def for_name(cls, name: str) -> "Greeting":
        return cls(message=TEMPLATE.format(name=name))
