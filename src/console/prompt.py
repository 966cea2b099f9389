"""Validated, attempt-capped input for the console."""

from dataclasses import dataclass
from typing import Any, Callable

from src.models.exceptions import TooManyAttemptsError

InputFunc = Callable[[str], str]
PrintFunc = Callable[[str], None]


@dataclass(frozen=True)
class PromptField:
    """One line of input: what to ask, how to convert it, and how to check it."""

    prompt: str
    validator: Callable[[Any], bool]
    error_message: str
    convert: Callable[[str], Any] = str


def ask(
    field: PromptField,
    input_func: InputFunc,
    print_func: PrintFunc,
    max_attempts: int = 3,
) -> Any:
    """
    Prompt until the answer converts and validates.

    A line that fails to convert counts as a failed attempt, same as one that
    fails validation.

    Args:
        field: The prompt definition
        input_func: Reads one line after showing the prompt (like input())
        print_func: Writes one line of output (like print())
        max_attempts: Failed answers allowed before giving up

    Returns:
        The converted value

    Raises:
        TooManyAttemptsError: After max_attempts failed answers
    """
    attempts = 0
    while attempts < max_attempts:
        raw = input_func(field.prompt)
        try:
            value = field.convert(raw)
        except ValueError:
            ok = False
        else:
            ok = field.validator(value)
        if ok:
            return value

        attempts += 1
        print_func(field.error_message)
        print_func(f"You have {max_attempts - attempts} attempts left.")

    print_func("Too many invalid attempts.")
    raise TooManyAttemptsError(f"No valid answer to {field.prompt.strip()!r}")
