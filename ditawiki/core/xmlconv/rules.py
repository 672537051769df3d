from __future__ import annotations

"""Declarative tag-rewrite table.

Each input tag resolves to exactly one :class:`Action`, with precedence

1. ``REMOVE``    tag and subtree are dropped, children are not visited
2. ``UNWRAP``    tag is dropped, its children are emitted in its place
3. ``TRANSLATE`` tag is renamed, attributes and children pass through
4. ``IDENTITY``  tag is emitted unchanged

After the output name is known, a callback registered for that *output* name
takes over emission of the whole element (see
:meth:`ditawiki.core.xmlconv.context.Context.emit_with_children`).

A :class:`Rules` value is immutable.  Callbacks that close over per-topic
state are attached with :meth:`Rules.with_callbacks`, which returns a new
value and leaves the shared table untouched.
"""

from dataclasses import dataclass, field, replace
import enum
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, Iterable, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from ditawiki.core.xmlconv.context import Context
    from ditawiki.core.xmlconv.tokens import StartTag, TokenStream

logger = logging.getLogger(__name__)

__all__ = ["Action", "Callback", "Rules", "is_body_tag", "new_html_rules"]

Callback = Callable[["Context", "TokenStream", "StartTag"], None]


def is_body_tag(name: str) -> bool:
    """Whether *name* is the content root of a topic (body, conbody, taskbody...)."""
    return "body" in name


class Action(enum.Enum):
    REMOVE = "remove"
    UNWRAP = "unwrap"
    TRANSLATE = "translate"
    IDENTITY = "identity"


@dataclass(frozen=True)
class Rules:
    """Immutable rewrite table for one target markup dialect.

    Attributes
    ----------
    translate
        Input tag name -> output tag name.
    remove
        Input tag names dropped together with their subtree.
    unwrap
        Input tag names replaced by their children.
    callbacks
        Output tag name -> callback taking over emission of the element.
    """

    translate: Mapping[str, str] = field(default_factory=dict)
    remove: FrozenSet[str] = frozenset()
    unwrap: FrozenSet[str] = frozenset()
    callbacks: Mapping[str, Callback] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "translate", MappingProxyType(dict(self.translate)))
        object.__setattr__(self, "remove", frozenset(self.remove))
        object.__setattr__(self, "unwrap", frozenset(self.unwrap))
        object.__setattr__(self, "callbacks", MappingProxyType(dict(self.callbacks)))

    def classify(self, name: str) -> Tuple[Action, str]:
        """Return the action for input tag *name* and the resulting output name."""
        if name in self.remove:
            return Action.REMOVE, name
        if name in self.unwrap:
            return Action.UNWRAP, name
        target = self.translate.get(name)
        if target:
            return Action.TRANSLATE, target
        return Action.IDENTITY, name

    def callback_for(self, output_name: str) -> Optional[Callback]:
        return self.callbacks.get(output_name)

    def with_callbacks(self, callbacks: Mapping[str, Callback]) -> "Rules":
        """Return a copy with *callbacks* added (replacing same-named ones)."""
        merged = dict(self.callbacks)
        merged.update(callbacks)
        return replace(self, callbacks=merged)

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "Rules":
        """Build rules from a ``translate``/``remove``/``unwrap`` mapping (YAML layout)."""
        translate = {str(k): str(v) for k, v in (data.get("translate") or {}).items()}
        remove = _names(data.get("remove"))
        unwrap = _names(data.get("unwrap"))
        return cls(translate=translate, remove=remove, unwrap=unwrap)


def _names(value: Optional[Iterable[Any]]) -> FrozenSet[str]:
    if not value:
        return frozenset()
    if isinstance(value, Mapping):
        # Also accept the ``{tag: true}`` layout
        return frozenset(str(k) for k, enabled in value.items() if enabled)
    return frozenset(str(v) for v in value)


def new_html_rules(config: Optional[Mapping[str, Any]] = None) -> Rules:
    """Return the DITA -> HTML rewrite table.

    *config* defaults to the ``html_rules`` section of the packaged
    configuration (``default_html_rules.yml`` plus user overrides).
    """
    if config is None:
        from ditawiki.config import ConfigManager

        config = ConfigManager().get_html_rules()
    rules = Rules.from_config(config)
    logger.debug(
        "HTML rules: translate=%d remove=%d unwrap=%d",
        len(rules.translate), len(rules.remove), len(rules.unwrap),
    )
    return rules
