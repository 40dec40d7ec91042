"""
Errors reported by set operations.
"""


class ElementTypeError(TypeError):
    """
    Raised when a value does not match the element type recorded by a Set.
    Captures the expected type and the offending value.
    """

    def __init__(self, expected: type, value: object):
        self.expected = expected
        self.value = value
        super().__init__(expected, value)

    def __str__(self) -> str:
        return (
            f"Set of {self.expected.__name__} cannot hold "
            f"{self.value!r} of type {type(self.value).__name__}"
        )


class ElementNotFound(KeyError):
    """
    Reported by Set.remove when one or more requested elements were absent.
    The removal of the elements that were present is not rolled back.
    """

    def __init__(self, missing: tuple):
        self.missing = missing
        super().__init__(missing)

    def __str__(self) -> str:
        return f"Element not found: {', '.join(map(repr, self.missing))}"
