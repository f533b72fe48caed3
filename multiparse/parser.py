# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Nondeterministic parsing combinators.

A parser (a recognizer) maps a sequence of tokens to the ordered list of all the ways
it can match a prefix of that sequence. Each way is a `Candidate`: the parsed value
and the position where the unconsumed rest of the tokens starts. You start with a few
primitive parsers, combine them into more complex ones, and finally call `parse()` to
run the whole grammar against the tokens.

The structure of the language:

* Class `Parser`
    * All the primitives and combinators of the language return `Parser` objects
    * It defines the main `Parser.parse(tokens)` method
* Primitive parsers
    * `one(token)`, `some(pred)`, `pure(x)`, `forward_decl()`, `finished`
* Parser combinators
    * `fmap(p, f)` aka `p >> f`, `combine(p1, p2)` aka `p1 | p2`, `option(p1, p2)`,
      `bind(p, f)`, `p1 + p2`, `-p`, `maybe(p)`, `many(p)`, `oneplus(p)`, `skip(p)`
* Running
    * `parse(p, tokens)` returns a `ParsingSuccess` or a `ParsingError`,
      `candidates(p, tokens)` returns every candidate

`parse()` picks the **last** candidate as the canonical one. `combine(p1, p2)` puts
the candidates of `p1` after the candidates of `p2`, so `p1` wins whenever both
alternatives match.

Parsers are immutable values: you can run the same parser any number of times against
any tokens, and its results depend only on the tokens.
"""

__all__ = [
    "one",
    "some",
    "pure",
    "fmap",
    "combine",
    "option",
    "bind",
    "maybe",
    "many",
    "oneplus",
    "skip",
    "finished",
    "forward_decl",
    "parse",
    "candidates",
    "Parser",
    "Candidate",
    "ErrorKind",
    "ParseError",
    "NoParseError",
    "IncompleteParseError",
    "ParsingResult",
    "ParsingSuccess",
    "ParsingError",
    "IgnoredValue",
]

import dataclasses as dc
import enum
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    TypeVar,
    Union,
    Protocol,
    final,
    cast,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

log = logging.getLogger("multiparse")

debug = False

_A = TypeVar("_A")
_B = TypeVar("_B")
_C = TypeVar("_C")

# Parsing result value
_R = TypeVar("_R", covariant=True)

_DC_KWARGS: dict[str, bool] = {}
if sys.version_info >= (3, 10):
    _DC_KWARGS["slots"] = True


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class Candidate(Generic[_B]):
    """One way to match a prefix of the tokens.

    `pos` is the index of the first unconsumed token, so the unconsumed suffix is
    `tokens[pos:]`.
    """

    value: _B
    pos: int

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.pos

    def rest(self, tokens: Sequence[_A]) -> Sequence[_A]:
        return tokens[self.pos :]


class ErrorKind(enum.Enum):
    NO_PARSE = "no parse"
    INCOMPLETE_PARSE = "incomplete parse"


class ParseError(Exception):
    def __init__(self, msg: str, pos: int) -> None:
        super().__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self) -> str:
        return self.msg


class NoParseError(ParseError):
    """The parser found no way to match the tokens."""


class IncompleteParseError(ParseError):
    """The canonical candidate left some tokens unconsumed."""


_ERRORS: dict[ErrorKind, type[ParseError]] = {
    ErrorKind.NO_PARSE: NoParseError,
    ErrorKind.INCOMPLETE_PARSE: IncompleteParseError,
}


class ParsingResult(Protocol[_R]):
    """Result monad for `parse()`.

    Immutable (objects' data should not be changed after creation).
    """

    def map(self, f: Callable[[_R], _C]) -> "ParsingResult[_C]":
        ...

    def bind(self, f: Callable[[_R], "ParsingResult[_C]"]) -> "ParsingResult[_C]":
        ...

    def __bool__(self) -> bool:
        ...


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class ParsingSuccess(ParsingResult[_R]):
    value: _R

    def map(self, f: Callable[[_R], _C]) -> ParsingResult[_C]:
        return ParsingSuccess(f(self.value))

    def bind(self, f: Callable[[_R], ParsingResult[_C]]) -> ParsingResult[_C]:
        return f(self.value)

    def __bool__(self) -> bool:
        return True


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class ParsingError(ParsingResult[_R]):
    kind: ErrorKind
    pos: int = 0
    message: str = "no parse"

    @property
    def error(self) -> ParseError:
        return _ERRORS[self.kind](self.message, self.pos)

    @property
    def value(self) -> _R:
        raise self.error

    def map(self, f: Callable[[_R], _C]) -> ParsingResult[_C]:
        return self  # type: ignore

    def bind(self, f: Callable[[_R], ParsingResult[_C]]) -> ParsingResult[_C]:
        return self  # type: ignore

    def __bool__(self) -> bool:
        return False


@dc.dataclass(frozen=True, eq=False, repr=False, **_DC_KWARGS)
class Parser(Generic[_A, _B]):
    """A parser object that can parse a sequence of tokens or can be combined with
    other parsers using `|`, `>>`, `+`, `bind()`, `option()` and other parsing
    combinators.

    Type: `Parser[A, B]`

    The generic variables in the type are: `A` is the type of the tokens in the
    sequence to parse, `B` is the type of the parsed value.

    Every kind of parser is a separate frozen dataclass that keeps its sub-parsers
    and its data in plain fields, so a grammar is a tree (or a graph, with
    `forward_decl()`) you can inspect.

    !!! Note

        The subclasses of `Parser` are considered **internal**. Use primitive parsers
        and parsing combinators to construct new parsers.
    """

    # A custom name, or a function computing it from the names of the sub-parsers
    _name: Union[str, Callable[[], str], None] = dc.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_name", None)

    @property
    def name(self) -> str:
        if self._name is None:
            return self._default_name()
        if callable(self._name):
            return self._name()
        return self._name

    def _default_name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return "<Parser %s>" % self.name

    def named(self, name: str) -> Self:
        """Return a copy of the parser with the specified name for easier debugging.

        Type: `(str) -> Parser[A, B]`

        This name is used in the debug-level parsing log and in error messages. You
        can also get it via the `Parser.name` attribute.

        Examples:

        ```pycon
        >>> digit = (one("0") | one("1")).named("digit")
        >>> digit.name
        'digit'

        ```

        ```pycon
        >>> (one("0") | one("1")).name
        "'0' or '1'"

        ```

        !!! Note

            You can enable the parsing log this way:

            ```python
            import logging
            logging.basicConfig(level=logging.DEBUG)
            import multiparse.parser
            multiparse.parser.debug = True
            ```
        """
        return self._renamed(name)

    def _renamed(self, name: Union[str, Callable[[], str]]) -> Self:
        p = dc.replace(self)
        object.__setattr__(p, "_name", name)
        return p

    def run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_B]]:
        """Run the parser against the tokens starting at the position `pos`.

        Type: `(Sequence[A], int) -> list[Candidate[B]]`

        Return the candidates in the order defined by the combinators. An empty list
        means that the parser cannot match the tokens at `pos`.

        !!! Warning

            This method is **internal** and may be changed in future versions. Use
            `Parser.parse(tokens)` or `Parser.candidates(tokens)` instead.
        """
        if debug:
            log.debug("trying %s at %d" % (self.name, pos))
        res = self._run(tokens, pos)
        if debug and res:
            log.debug(
                "*matched* %s at %d, %d candidate(s)" % (self.name, pos, len(res))
            )
        return res

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_B]]:
        raise NotImplementedError("Subclasses must implement this method")

    def candidates(self, tokens: Sequence[_A]) -> list[Candidate[_B]]:
        """Return all the candidates of the parser for the whole sequence of tokens.

        Type: `(Sequence[A]) -> list[Candidate[B]]`

        Examples:

        ```pycon
        >>> [tuple(c) for c in maybe(one("x")).candidates("xy")]
        [(None, 0), ('x', 1)]

        ```
        """
        return self.run(tokens, 0)

    def parse(self, tokens: Sequence[_A]) -> ParsingResult[_B]:
        """Parse the sequence of tokens and return the parsing result.

        Type: `(Sequence[A]) -> ParsingResult[B]`

        The last candidate of the parser is the canonical one. The result is:

        * `ParsingError` of the kind `ErrorKind.NO_PARSE` if there are no candidates
        * `ParsingError` of the kind `ErrorKind.INCOMPLETE_PARSE` if the canonical
          candidate leaves some tokens unconsumed
        * `ParsingSuccess` with the value of the canonical candidate otherwise

        It never raises parsing errors itself. Accessing `ParsingError.value` raises
        the corresponding `ParseError`.

        Examples:

        ```pycon
        >>> expr = one("x")
        >>> expr.parse("x")
        ParsingSuccess(value='x')
        >>> expr.parse("xx").kind.name
        'INCOMPLETE_PARSE'
        >>> print(expr.parse("xx").message)
        got unexpected token: 'x', expected: end of input

        ```
        """
        cs = self.run(tokens, 0)
        if not cs:
            kind = ErrorKind.NO_PARSE
            pos = 0
        else:
            canonical = cs[-1]
            if canonical.pos >= len(tokens):
                return ParsingSuccess(canonical.value)
            kind = ErrorKind.INCOMPLETE_PARSE
            pos = canonical.pos
        if debug:
            log.debug("%s: %s at %d" % (self.name, kind.value, pos))
        return ParsingError(kind, pos, _format_parsing_error(kind, pos, tokens, self))

    def map(self, f: Callable[[_B], _C]) -> "Parser[_A, _C]":
        """Transform the value of every candidate by applying the function `f`.

        Type: `(Callable[[B], C]) -> Parser[A, C]`

        The positions and the order of the candidates stay the same.
        """
        return _Map(self, f)

    def __rshift__(self, f: Callable[[_B], _C]) -> "Parser[_A, _C]":
        """An alias for `Parser.map(f)`.

        Examples:

        ```pycon
        >>> def make_canonical_name(s):
        ...     return s.lower()
        >>> expr = (one("D") | one("d")) >> make_canonical_name
        >>> expr.parse("D").value
        'd'
        >>> expr.parse("d").value
        'd'

        ```
        """
        return self.map(f)

    def combine(self, other: "Parser[_A, _B]") -> "Parser[_A, _B]":
        """Union of parsers: the candidates of `other` followed by the candidates of
        this parser.

        Type: `(Parser[A, B]) -> Parser[A, B]`

        Both parsers are always run. Since `parse()` selects the last candidate, this
        parser is preferred whenever both of them match.
        """
        return _Combine(self, other)

    def __or__(self, other: "Parser[_A, _B]") -> "Parser[_A, _B]":
        """An alias for `Parser.combine(other)`.

        Examples:

        ```pycon
        >>> expr = one("x") | one("y")
        >>> expr.parse("x").value
        'x'
        >>> expr.parse("y").value
        'y'
        >>> print(expr.parse("z").message)
        no parse, expected: 'x' or 'y'

        ```
        """
        return self.combine(other)

    def option(self, other: "Parser[_A, _B]") -> "Parser[_A, _B]":
        """Ordered choice of parsers: the candidates of this parser, or, only if there
        are none, the candidates of `other`.

        Type: `(Parser[A, B]) -> Parser[A, B]`

        The `other` parser is not run at all if this parser has any candidates, even
        the ones that leave some tokens unconsumed.
        """
        return _Option(self, other)

    def bind(self, f: Callable[[_B], "Parser[_A, _C]"]) -> "Parser[_A, _C]":
        """Bind the parser to a monadic function that returns a new parser.

        Type: `(Callable[[B], Parser[A, C]]) -> Parser[A, C]`

        Also known as `>>=` in Haskell.

        For every candidate of this parser in order, the parser `f(value)` is run
        against the rest of the tokens. The result is all their candidates
        concatenated.

        Examples:

        ```pycon
        >>> expr = one("a").bind(lambda a: one("b") >> (lambda b: a + b))
        >>> expr.parse("ab").value
        'ab'

        ```
        """
        return _Bind(self, f)

    def __add__(self, other: "Parser[_A, Any]") -> "Parser[_A, Any]":
        """Sequential combination of parsers. It runs this parser, then the other
        parser against the rest of the tokens of every candidate.

        The value of the resulting parser is a tuple of each parsed value in the sum
        of parsers. We merge all parsing results of `p1 + p2 + ... + pN` into a
        single tuple. Values of the parsers wrapped in `-p` or `skip(p)` are dropped.

        Examples:

        ```pycon
        >>> expr = one("x") + one("y") + one("z")
        >>> expr.parse("xyz").value
        ('x', 'y', 'z')

        ```

        ```pycon
        >>> expr = one("x") + -one("y") + one("z")
        >>> expr.parse("xyz").value
        ('x', 'z')

        ```

        ```pycon
        >>> expr = -one("(") + one("x") + -one(")")
        >>> expr.parse("(x)").value
        'x'

        ```
        """

        def _then(v1: Any) -> Parser[_A, Any]:
            return _Map(other, lambda v2: _join(v1, v2))

        return _Bind(self, _then)._renamed(
            lambda: "(%s, %s)" % (self.name, other.name)
        )

    def __neg__(self) -> "Parser[_A, IgnoredValue]":
        """Return a parser that parses the same tokens, but its parsing result is
        ignored by the sequential `+` combinator.

        Type: `(Parser[A, B]) -> Parser[A, IgnoredValue]`

        You can use it for throwing away elements of concrete syntax (e.g. `","`,
        `";"`).

        !!! Note

            You **should not** pass the resulting parser to any combinators other than
            `+`. You **should** have at least one non-skipped value in your
            `p1 + p2 + ... + pN`.
        """
        return _Map(self, _ignore)


def _format_parsing_error(
    kind: ErrorKind, pos: int, tokens: Sequence[Any], p: Parser
) -> str:
    if pos >= len(tokens):
        msg = "got unexpected end of input"
    elif kind is ErrorKind.NO_PARSE:
        msg = "no parse"
    else:
        t_value = t = tokens[pos]
        loc = ""

        try:  # Token-like object
            if t.start is not None and t.end is not None:
                s_line, s_pos = t.start
                e_line, e_pos = t.end
                loc = f"{s_line},{s_pos}-{e_line},{e_pos}: "
            t_value = t.value
        except (AttributeError, TypeError):
            pass

        msg = f"{loc}got unexpected token: "
        if isinstance(t_value, str):
            msg += repr(t_value)
        else:
            msg += str(t_value)

    if kind is ErrorKind.NO_PARSE:
        return f"{msg}, expected: {p.name}"
    return f"{msg}, expected: end of input"


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _One(Parser[_A, _A]):
    token: _A

    def _default_name(self) -> str:
        name = getattr(self.token, "name", self.token)
        return repr(name)

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_A]]:
        if pos < len(tokens) and tokens[pos] == self.token:
            return [Candidate(self.token, pos + 1)]
        return []


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Some(Parser[_A, _A]):
    pred: Callable[[_A], bool]

    def _default_name(self) -> str:
        return "some(...)"

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_A]]:
        if pos < len(tokens) and self.pred(tokens[pos]):
            return [Candidate(tokens[pos], pos + 1)]
        return []


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Pure(Parser[Any, _B]):
    x: _B

    def _default_name(self) -> str:
        return "(pure %r)" % (self.x,)

    def _run(self, tokens: Sequence[Any], pos: int) -> list[Candidate[_B]]:
        return [Candidate(self.x, pos)]


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Finished(Parser[Any, None]):
    def _default_name(self) -> str:
        return "end of input"

    def _run(self, tokens: Sequence[Any], pos: int) -> list[Candidate[None]]:
        if pos >= len(tokens):
            return [Candidate(None, pos)]
        return []


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Map(Parser[_A, _C], Generic[_A, _B, _C]):
    p: Parser[_A, _B]
    f: Callable[[_B], _C]

    def _default_name(self) -> str:
        return self.p.name

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_C]]:
        return [Candidate(self.f(c.value), c.pos) for c in self.p.run(tokens, pos)]


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Combine(Parser[_A, _B]):
    p1: Parser[_A, _B]
    p2: Parser[_A, _B]

    def _default_name(self) -> str:
        return f"{self.p1.name} or {self.p2.name}"

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_B]]:
        res1 = self.p1.run(tokens, pos)
        res2 = self.p2.run(tokens, pos)
        # The candidates of p1 go last, so p1 wins in parse()
        return res2 + res1


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Option(Parser[_A, _B]):
    p1: Parser[_A, _B]
    p2: Parser[_A, _B]

    def _default_name(self) -> str:
        return f"{self.p1.name} or else {self.p2.name}"

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_B]]:
        res = self.p1.run(tokens, pos)
        if res:
            return res
        return self.p2.run(tokens, pos)


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Bind(Parser[_A, _C], Generic[_A, _B, _C]):
    p: Parser[_A, _B]
    f: Callable[[_B], Parser[_A, _C]]

    def _default_name(self) -> str:
        return f"({self.p.name} >>=)"

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_C]]:
        return [
            c2
            for c1 in self.p.run(tokens, pos)
            for c2 in self.f(c1.value).run(tokens, c1.pos)
        ]


@final
@dc.dataclass(frozen=True, **_DC_KWARGS)
class _Many(Parser[_A, list[_B]]):
    p: Parser[_A, _B]

    def _default_name(self) -> str:
        return "{ %s }" % self.p.name

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[list[_B]]]:
        # Same order as combine(p.bind(...many...), pure([])): a repetition, then
        # all of its extensions
        acc = []
        stack: list[Candidate[tuple]] = [Candidate((), pos)]
        while stack:
            c = stack.pop()
            acc.append(Candidate(list(c.value), c.pos))
            res = self.p.run(tokens, c.pos)
            stack.extend(Candidate(c.value + (r.value,), r.pos) for r in reversed(res))
        if debug:
            log.debug(f"*matched* {len(acc)} instances of {self.name}")
        return acc


@final
@dc.dataclass(frozen=True, eq=False, repr=False, **_DC_KWARGS)
class _ForwardDecl(Parser[_A, _B]):
    p: Optional[Parser[_A, _B]] = None

    def _default_name(self) -> str:
        return "forward_decl()"

    def named(self, name: str) -> Self:
        # Renamed in place: rules defined earlier hold this very object
        object.__setattr__(self, "_name", name)
        return self

    def define(self, p: Parser[_A, _B]) -> None:
        """Define the parser created earlier as a forward declaration.

        Type: `(Parser[A, B]) -> None`

        Use `p = forward_decl()` in combination with `p.define(...)` to define
        recursive parsers.

        See the examples in the docs for `forward_decl()`.
        """
        object.__setattr__(self, "p", p)

    def _run(self, tokens: Sequence[_A], pos: int) -> list[Candidate[_B]]:
        if self.p is None:
            raise NotImplementedError("you must define() a forward_decl somewhere")
        return self.p.run(tokens, pos)


class _Tuple(tuple):
    """Parsed values from multiple combined parsers."""

    @classmethod
    def combine(cls, v1: Any, v2: Any) -> Self:
        if isinstance(v1, cls):
            return cls(v1 + (v2,))
        else:
            return cls((v1, v2))


@final
@dc.dataclass(**_DC_KWARGS)
class IgnoredValue:
    """Constant to indicate an ignored parsed value."""

    pass


_IGNORED = IgnoredValue()


def _ignore(_: Any) -> IgnoredValue:
    return _IGNORED


def _join(v1: Any, v2: Any) -> Any:
    if isinstance(v1, IgnoredValue):
        return v2
    if isinstance(v2, IgnoredValue):
        return v1
    return _Tuple.combine(v1, v2)


finished: Parser[Any, None] = _Finished()
"""A parser that matches only at the end of input. Its value is `None`."""


def one(token: _A) -> Parser[_A, _A]:
    """Return a parser that parses a token if it's equal to `token`.

    Type: `(A) -> Parser[A, A]`

    It consumes exactly one token and its value is `token`.

    Examples:

    ```pycon
    >>> expr = one("x")
    >>> expr.parse("x").value
    'x'
    >>> print(expr.parse("y").message)
    no parse, expected: 'x'
    >>> print(expr.parse("").message)
    got unexpected end of input, expected: 'x'

    ```
    """
    return _One(token)


def some(pred: Callable[[_A], bool]) -> Parser[_A, _A]:
    """Return a parser that parses a token if it satisfies the predicate `pred`.

    Type: `(Callable[[A], bool]) -> Parser[A, A]`

    Its value is the parsed token itself.

    Examples:

    ```pycon
    >>> expr = some(lambda s: s.isalpha()).named("alpha")
    >>> expr.parse("x").value
    'x'
    >>> print(expr.parse("1").message)
    no parse, expected: alpha

    ```
    """
    return _Some(pred)


def pure(x: _B) -> Parser[Any, _B]:
    """Wrap any object into a parser.

    Type: `(B) -> Parser[A, B]`

    A pure parser doesn't touch the tokens sequence, it just returns its pure `x`
    value.

    Also known as `return` in Haskell.
    """
    return _Pure(x)


def fmap(p: Parser[_A, _B], f: Callable[[_B], _C]) -> Parser[_A, _C]:
    """Transform the parsing result of `p` by applying `f` to the value of every
    candidate.

    Type: `(Parser[A, B], Callable[[B], C]) -> Parser[A, C]`

    The same as `p >> f`.
    """
    return p.map(f)


def combine(p1: Parser[_A, _B], p2: Parser[_A, _B]) -> Parser[_A, _B]:
    """Return a parser that runs both `p1` and `p2` and yields the candidates of `p2`
    followed by the candidates of `p1`.

    Type: `(Parser[A, B], Parser[A, B]) -> Parser[A, B]`

    The same as `p1 | p2`. See also `Parser.combine()`.

    Examples:

    ```pycon
    >>> expr = combine(one("a"), one("b"))
    >>> expr.parse("a").value
    'a'
    >>> expr.parse("b").value
    'b'
    >>> expr.parse("c").kind.name
    'NO_PARSE'

    ```
    """
    return p1.combine(p2)


def option(p1: Parser[_A, _B], p2: Parser[_A, _B]) -> Parser[_A, _B]:
    """Return a parser that yields the candidates of `p1`, or the candidates of `p2`
    if `p1` has none.

    Type: `(Parser[A, B], Parser[A, B]) -> Parser[A, B]`

    See also `Parser.option()`.

    Examples:

    ```pycon
    >>> expr = option(one("a"), one("b"))
    >>> expr.parse("b").value
    'b'

    ```
    """
    return p1.option(p2)


def bind(p: Parser[_A, _B], f: Callable[[_B], Parser[_A, _C]]) -> Parser[_A, _C]:
    """Bind the parser `p` to a monadic function `f` that returns a new parser.

    Type: `(Parser[A, B], Callable[[B], Parser[A, C]]) -> Parser[A, C]`

    See also `Parser.bind()`.
    """
    return p.bind(f)


def parse(p: Parser[_A, _B], tokens: Sequence[_A]) -> ParsingResult[_B]:
    """Parse the sequence of tokens with the parser `p`.

    Type: `(Parser[A, B], Sequence[A]) -> ParsingResult[B]`

    See also `Parser.parse()`.
    """
    return p.parse(tokens)


def candidates(p: Parser[_A, _B], tokens: Sequence[_A]) -> list[Candidate[_B]]:
    """Return all the candidates of the parser `p` for the sequence of tokens.

    Type: `(Parser[A, B], Sequence[A]) -> list[Candidate[B]]`

    See also `Parser.candidates()`.
    """
    return p.candidates(tokens)


def maybe(p: Parser[_A, _B]) -> Parser[_A, Optional[_B]]:
    """Return a parser that also matches nothing with the value `None`.

    Examples:

    ```pycon
    >>> expr = maybe(one("x"))
    >>> expr.parse("x").value
    'x'
    >>> expr.parse("").value is None
    True

    ```
    """
    return combine(cast(Parser[_A, Optional[_B]], p), pure(None))._renamed(
        lambda: "[ %s ]" % (p.name,)
    )


def many(p: Parser[_A, _B]) -> Parser[_A, list[_B]]:
    """Return a parser that applies the parser `p` zero or more times.

    The candidates go from the shortest repetition to the longest one, so the
    longest one is the canonical candidate. The parsed value is a list of the
    sequentially parsed values.

    Examples:

    ```pycon
    >>> expr = many(one("x"))
    >>> expr.parse("xx").value
    ['x', 'x']
    >>> expr.parse("").value
    []
    >>> [tuple(c) for c in expr.candidates("xxy")]
    [([], 0), (['x'], 1), (['x', 'x'], 2)]

    ```

    !!! Warning

        The parser `p` must consume at least one token on success, otherwise the
        resulting parser never terminates.
    """
    return _Many(p)


def oneplus(p: Parser[_A, _B]) -> Parser[_A, list[_B]]:
    """Return a parser that applies the parser `p` one or more times.

    A similar parser combinator `many(p)` means apply `p` zero or more times, whereas
    `oneplus(p)` means apply `p` one or more times.

    Examples:

    ```pycon
    >>> expr = oneplus(one("x"))
    >>> expr.parse("xx").value
    ['x', 'x']
    >>> expr.parse("").kind.name
    'NO_PARSE'

    ```
    """
    many_p = many(p)
    return p.bind(lambda v: many_p.map(lambda vs: [v] + vs))._renamed(
        lambda: "(%s, { %s })" % (p.name, p.name)
    )


def skip(p: Parser[_A, Any]) -> Parser[_A, IgnoredValue]:
    """An alias for `-p`.

    See also docs for `Parser.__neg__()`.
    """
    return -p


def forward_decl() -> Parser[Any, Any]:
    """Return an undefined parser that can be used as a forward declaration.

    Type: `Parser[Any, Any]`

    Use `p = forward_decl()` in combination with `p.define(...)` to define recursive
    parsers.

    Examples:

    ```pycon
    >>> expr = forward_decl()
    >>> expr.define(one("x") + maybe(expr) + one("y"))
    >>> expr.parse("xxyy").value
    ('x', ('x', None, 'y'), 'y')
    >>> expr.parse("xxy").kind.name
    'NO_PARSE'

    ```

    !!! Note

        If you care about static types, you should add a type hint for your forward
        declaration, so that your type checker can check types in `p.define(...)` later:

        ```python
        p: Parser[str, int] = forward_decl()
        p.define(one("x"))  # Type checker error
        p.define(one("1") >> int)  # OK
        ```
    """
    return _ForwardDecl()


if __name__ == "__main__":
    import doctest

    doctest.testmod()
