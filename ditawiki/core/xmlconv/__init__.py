from __future__ import annotations

"""Table-driven streaming markup rewriter.

Key components:
- Rules: immutable tag rewrite table (remove / unwrap / translate / callbacks)
- Context: single-pass rewriter for one topic, with diagnostics
- iter_tokens / TokenStream: pull-based token input
- Encoder / Fragment: output accumulator and its result
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from .context import Context
from .encoder import Encoder, Fragment
from .rules import Action, Callback, Rules, is_body_tag, new_html_rules
from .selectors import extract_title, find_selector, split_link
from .tokens import (
    CharData,
    Comment,
    EndTag,
    ProcInst,
    StartTag,
    Token,
    TokenStream,
    iter_tokens,
)

if TYPE_CHECKING:
    from ditawiki.core.exceptions import ConversionDiagnostic
    from ditawiki.core.xmlconv.tokens import Source

__all__ = [
    "Action",
    "Callback",
    "CharData",
    "Comment",
    "Context",
    "Encoder",
    "EndTag",
    "Fragment",
    "ProcInst",
    "Rules",
    "StartTag",
    "Token",
    "TokenStream",
    "extract_title",
    "find_selector",
    "is_body_tag",
    "iter_tokens",
    "new_html_rules",
    "rewrite",
    "split_link",
]


def rewrite(source: "Source", rules: Rules, *, path: Optional[str] = None
            ) -> Tuple[Fragment, List["ConversionDiagnostic"]]:
    """Tokenize *source* and rewrite it with *rules* in one go."""
    context = Context(rules, decoding_path=path or "")
    fragment = context.run(iter_tokens(source, path=path))
    return fragment, context.errors
