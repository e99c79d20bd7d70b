# errors.py

class KolorError(Exception):
    """Base class for all kolor errors."""


class DuplicateNameError(KolorError, ValueError):
    """A registry already holds an entry under this name."""

    def __init__(self, name: str, existing_value):
        self.name = name
        self.existing_value = existing_value
        super().__init__(
            f"Duplicate name {name}; already registered with value {existing_value!r}"
        )


class DuplicateValueError(KolorError, ValueError):
    """A registry already holds this value under another name."""

    def __init__(self, name: str, value, existing: str):
        self.name = name
        self.value = value
        self.existing = existing
        super().__init__(
            f"Duplicate value {value!r} for {name}; already assigned to {existing}"
        )


class RegistryTypeError(KolorError, TypeError):
    """A value does not match the type declared for its registry."""

    def __init__(self, name: str, expected: type, actual: type):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid value type for {name}: expected {expected.__name__}, got {actual.__name__}"
        )


class ThemeNotFoundError(KolorError, LookupError):
    """Raised when removing a theme that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Theme {name} not found")

    def __str__(self) -> str:
        return self.args[0]


class ProtectedThemeError(KolorError, ValueError):
    """Raised when removing one of the built-in themes."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot remove built-in theme {name}")


class ConfigError(KolorError):
    """A configuration file could not be loaded."""


class ReservedNameError(KolorError, ValueError):
    """A theme name would shadow a color, style or styled-text attribute."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is reserved for a color, style or built-in method")
