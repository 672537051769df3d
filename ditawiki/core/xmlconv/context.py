from __future__ import annotations

"""Streaming rewriter: one conversion run over one topic.

The :class:`Context` pulls tokens from a :class:`TokenStream` in a single
depth-first pass and writes the rewritten tokens to its :class:`Encoder`.
Start tags are classified through the :class:`Rules`; a callback registered
for the output tag name receives the stream positioned right after the start
tag and is responsible for the whole element.

Structural problems in the input raise :class:`DecodeError` and abort the run.
Domain problems (missing link targets and the like) are recorded with
:meth:`Context.report` and the run continues.

A context is not re-entrant: create one per topic.  Contexts of different
topics may run in parallel as long as they only read the shared index and
mapping.
"""

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from ditawiki.core.exceptions import ConversionDiagnostic, DecodeError
from ditawiki.core.xmlconv.encoder import Encoder, Fragment
from ditawiki.core.xmlconv.rules import Action, Rules
from ditawiki.core.xmlconv.tokens import (
    CharData,
    EndTag,
    StartTag,
    Token,
    TokenStream,
)

if TYPE_CHECKING:
    from ditawiki.core.models import Index

logger = logging.getLogger(__name__)

__all__ = ["Context"]


class Context:
    """Per-topic conversion state.

    Attributes
    ----------
    index
        Topic index used by link-resolving callbacks (read only).
    decoding_path
        Source path of the topic being converted; relative references are
        resolved against its directory.
    rules
        Rewrite table, usually carrying per-topic callbacks.
    errors
        Non-fatal diagnostics, in the order they were reported.
    encoder
        Output accumulator.  Callbacks may write synthetic elements through
        :meth:`Encoder.write_start` / :meth:`Encoder.write_end`.
    output
        The converted fragment once :meth:`run` has completed.
    """

    def __init__(
        self,
        rules: Rules,
        index: Optional["Index"] = None,
        decoding_path: str = "",
    ) -> None:
        self.rules = rules
        self.index = index
        self.decoding_path = decoding_path
        self.errors: List[ConversionDiagnostic] = []
        self.encoder = Encoder()
        self.output: Optional[Fragment] = None
        # input names of the elements currently open
        self._open: List[str] = []
        self._started = False

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def run(self, tokens: Union[TokenStream, Iterable[Token]]) -> Fragment:
        """Convert *tokens* and return the fragment.

        Raises
        ------
        DecodeError
            When the stream is structurally malformed.  Nothing is returned
            in that case, diagnostics gathered so far stay on :attr:`errors`.
        """
        if self._started:
            raise RuntimeError("a Context converts exactly one topic")
        self._started = True

        stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
        try:
            for token in stream:
                if isinstance(token, EndTag):
                    raise self._decode_error(f"unexpected end tag </{token.name}>")
                self._handle(stream, token)
        except DecodeError:
            logger.error("Decode FAIL: path=%s", self.decoding_path or "<input>")
            raise

        self.output = self.encoder.close()
        logger.debug("Rewrote %s: %d token(s) read", self.decoding_path or "<input>", stream.consumed)
        if self.errors:
            logger.info("Converted %s with %d diagnostic(s)", self.decoding_path or "<input>", len(self.errors))
        return self.output

    # ------------------------------------------------------------------
    # Primitives for callbacks
    # ------------------------------------------------------------------
    def emit_with_children(self, tokens: TokenStream, start: StartTag) -> None:
        """Emit *start*, rewrite the children recursively, emit the end tag.

        The end tag carries ``start.name`` (the output name), independent of
        the input name it closes.
        """
        self.encoder.write_start(start.name, start.attrs)
        self._process_children(tokens)
        self.encoder.write_end(start.name)

    def skip(self, tokens: TokenStream) -> None:
        """Consume the rest of the current element, end tag included, without output."""
        depth = len(self._open)
        if depth == 0:
            return
        for token in tokens:
            if isinstance(token, StartTag):
                self._open.append(token.name)
            elif isinstance(token, EndTag):
                self._close(token)
                if len(self._open) < depth:
                    return
        raise self._decode_error(f"unexpected end of input inside <{self._open[-1]}>")

    def report(self, diagnostic: ConversionDiagnostic) -> None:
        """Record a non-fatal problem and carry on."""
        if diagnostic.path is None:
            diagnostic.path = self.decoding_path
        self.errors.append(diagnostic)
        logger.warning("Diagnostic in %s: %s", self.decoding_path or "<input>", diagnostic)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _handle(self, tokens: TokenStream, token: Token) -> None:
        if isinstance(token, StartTag):
            self._handle_start(tokens, token)
        elif isinstance(token, CharData):
            self.encoder.write_data(token.text)
        # comments and processing instructions are not carried over

    def _handle_start(self, tokens: TokenStream, start: StartTag) -> None:
        depth = len(self._open)
        self._open.append(start.name)

        action, name = self.rules.classify(start.name)
        if action is Action.REMOVE:
            self.skip(tokens)
            return
        if action is Action.UNWRAP:
            self._process_children(tokens)
            return

        out = start.renamed(name)
        callback = self.rules.callback_for(name)
        if callback is None:
            self.emit_with_children(tokens, out)
            return

        callback(self, tokens, out)
        if len(self._open) > depth:
            # the callback did not consume the element; drop what is left of it
            logger.debug("Callback for <%s> left the element open; skipping rest", name)
            self.skip(tokens)

    def _process_children(self, tokens: TokenStream) -> None:
        """Rewrite tokens up to and including the end tag of the current element."""
        depth = len(self._open)
        for token in tokens:
            if isinstance(token, EndTag):
                self._close(token)
                return
            self._handle(tokens, token)
            if len(self._open) < depth:
                return
        raise self._decode_error(f"unexpected end of input inside <{self._open[-1]}>")

    def _close(self, end: EndTag) -> None:
        if not self._open:
            raise self._decode_error(f"unexpected end tag </{end.name}>")
        expected = self._open[-1]
        if end.name != expected:
            raise self._decode_error(f"end tag </{end.name}> does not match <{expected}>")
        self._open.pop()

    def _decode_error(self, message: str) -> DecodeError:
        where = self.decoding_path or "<input>"
        return DecodeError(f"{where}: {message}", self.decoding_path or None)
