from dataclasses import dataclass
from typing import Any, ClassVar, Self


@dataclass
class Data:
    # alternative spellings accepted for field names, e.g. {"inputFormat": "input_format"}
    aliases: ClassVar[dict[str, str]] = {}

    @classmethod
    def create(cls, **kwargs) -> Self:
        return cls(**cls.known_fields(kwargs))

    @classmethod
    def known_fields(cls, kwargs: dict[str, Any]) -> dict[str, Any]:
        new_kwargs: dict[str, Any] = {}
        for k, v in kwargs.items():
            k = cls.aliases.get(k, k)
            if k in cls.__match_args__:
                new_kwargs[k] = v
        return new_kwargs
