"""
Classification of raw console tokens into switches, parameters and values.

Supported forms:

- ``value``: a naked positional value
- ``--switch``: a long-form switch
- ``--name=value``: a long-form parameter
- ``-s``: a short-form switch, when last or followed by another marked token
- ``-p value``: a short-form parameter consuming the next token
- ``-abcp value``: chained short-form switches, the last of which may be a
  parameter (as with ``tar -xzvf archive``)
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from consoleapp.cli.arguments import ArgumentState
from consoleapp.cli.constants import (
    ARG_MARKER,
    INVALID_PARAMETER_MESSAGE,
    PARAM_SEPARATOR,
)


@dataclass(frozen=True)
class ArgumentParseWarning:
    """
    Diagnostic event for a token that could not be classified.

    :param token: The offending raw token
    :type token: str
    :param message: Human-readable description naming the token
    :type message: str
    """

    token: str
    message: str


WarningSink = Callable[[ArgumentParseWarning], None]


def _is_marked(token: str) -> bool:
    return token.startswith(ARG_MARKER)


def _classify_long_form(
    token: str, state: ArgumentState, on_warning: WarningSink | None
) -> None:
    body = token[2:]
    if PARAM_SEPARATOR not in body:
        state.switch_on(body)
        return

    parts = body.split(PARAM_SEPARATOR)
    if len(parts) != 2:
        if on_warning is not None:
            on_warning(
                ArgumentParseWarning(
                    token=token,
                    message=INVALID_PARAMETER_MESSAGE.format(token=token),
                )
            )
        return
    state.set_param(parts[0], parts[1])


def classify_args(
    tokens: Sequence[str] | None,
    state: ArgumentState | None = None,
    on_warning: WarningSink | None = None,
) -> ArgumentState:
    """
    Sort raw command-line tokens into switches, parameters and values.

    Tokens are walked once from left to right. A marked token whose last
    character could be either a switch or a parameter name is resolved by
    looking at the next token: if there is none, or it is itself marked,
    the character is a switch; otherwise it names a parameter and the next
    token is consumed as its value. A marked token can therefore never be a
    parameter's value.

    Long-form parameters that do not split into exactly one name and one
    value are reported to ``on_warning`` and dropped; classification then
    continues with the following token.

    :param tokens: Raw tokens, typically ``sys.argv[1:]``; None or empty is a no-op
    :type tokens: Sequence[str] | None
    :param state: State to populate in place; a new one is created if omitted
    :type state: ArgumentState | None
    :param on_warning: Sink receiving parse warnings; warnings are discarded if omitted
    :type on_warning: WarningSink | None
    :return: The populated state
    :rtype: ArgumentState
    """
    if state is None:
        state = ArgumentState()
    if not tokens:
        return state

    last_index = len(tokens) - 1
    index = 0
    while index <= last_index:
        token = tokens[index]

        if not _is_marked(token) or len(token) == 1:
            state.push_value(token)
        elif token[1] == ARG_MARKER:
            _classify_long_form(token, state, on_warning)
        else:
            # Everything but the last character of a chain is a switch.
            for name in token[1:-1]:
                state.switch_on(name)

            trailing = token[-1]
            if index == last_index or _is_marked(tokens[index + 1]):
                state.switch_on(trailing)
            else:
                index += 1
                state.set_param(trailing, tokens[index])

        index += 1

    return state
