from enum import Enum
from enum import unique


class StrEnum(str, Enum):
    def __str__(self):
        # type: () -> str
        return self.value

    def __format__(self, format_spec):
        # type: (str) -> str
        return format(self.value, format_spec)


@unique
class ParamTier(StrEnum):
    """How essential a tracking parameter is to a meaningful request.

    Tiers are advisory: nothing in the package enforces them.
    """

    REQUIRED = "required"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"
