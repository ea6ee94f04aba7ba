"""
Decorator applier.

Wraps rendered text with a decorator's marker, once, outermost.
"""

from fancyfonts.models.font import Decorator


def decorate(text: str, decorator: Decorator | None) -> str:
    """
    Wrap text as "<value> <text> <value>".

    Text is returned unchanged when there is no decorator or its value is
    empty after trimming. Multi-line text is wrapped as a whole, not per line.
    """
    value = decorator.value.strip() if decorator is not None else ""
    if not value:
        return text
    return f"{value} {text} {value}"
