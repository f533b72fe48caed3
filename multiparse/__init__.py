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

"""Nondeterministic parsing combinators over sequences of tokens."""

from multiparse.parser import (
    Candidate,
    ErrorKind,
    IgnoredValue,
    IncompleteParseError,
    NoParseError,
    ParseError,
    Parser,
    ParsingError,
    ParsingResult,
    ParsingSuccess,
    bind,
    candidates,
    combine,
    finished,
    fmap,
    forward_decl,
    many,
    maybe,
    one,
    oneplus,
    option,
    parse,
    pure,
    skip,
    some,
)

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
