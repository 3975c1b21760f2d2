"""generator.py - turn a pattern into words a person wants to read.

two ways to get a narrative:
    narrative_of(pattern)          the author-written one. deterministic.
                                   this is the normal path.
    generate_for_category(c, name) pick one sentence per slot from the
                                   category's pools. "variety mode".

randomness comes from an injected rng (anything with .random() -> [0, 1)).
each generator owns its own; nothing shares one.

in the world: the same lesson, told warmly, in whichever format the
room needs.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from evangeliser.catalog import Narrative, Pattern
from evangeliser.glyphs import REGISTRY
from evangeliser.narrative.templates import DEFAULT_STORE, TemplateStore

DEFAULT_TARGET = "ReScript"

_SUCCESS = (
    "🎉 Nice! You just met the {name} pattern in {target}.",
    "✨ {name}: learned. Your future self says thanks.",
    "🚀 That's {name} done. Onward!",
    "💚 You've got {name} down. The compiler is on your side now.",
)

# (which pattern list to draw from, sentence shape)
_HINTS = (
    ("best_practices", "💡 Tip: {item}"),
    ("learning_objectives", "🎯 Try this: {item}"),
    ("common_mistakes", "⚠️ Watch out for: {item}"),
)


class NarrativeGenerator:

    def __init__(self, store: Optional[TemplateStore] = None, rng=None,
                 target_language: str = DEFAULT_TARGET):
        self.store = store if store is not None else DEFAULT_STORE
        self.rng = rng if rng is not None else random.SystemRandom()
        self.target_language = target_language

    # ------------------------------------------------------------
    # narratives
    # ------------------------------------------------------------

    def narrative_of(self, pattern: Pattern) -> Narrative:
        """the pattern's own narrative, exactly as written."""
        return pattern.narrative

    def generate_for_category(self, category, pattern_name: str) -> Narrative:
        """one random pick per slot from the category's pools."""
        bundle = self.store.resolve(category)
        return Narrative(
            celebrate=self._pick(bundle.celebrate),
            minimize=self._pick(bundle.minimize),
            better=self._pick(bundle.better),
            safety=self._pick(bundle.safety),
            example=f"See how the {pattern_name} pattern works in {self.target_language}!",
        )

    def narrate(self, pattern: Pattern, variety: bool = False) -> Narrative:
        """fixed narrative unless variety mode is on."""
        if variety:
            return self.generate_for_category(pattern.category, pattern.name)
        return self.narrative_of(pattern)

    def success_message(self, pattern_name: str) -> str:
        return self._pick(_SUCCESS).format(name=pattern_name, target=self.target_language)

    def hint(self, pattern: Pattern) -> str:
        field_name, shape = self._pick(_HINTS)
        items = getattr(pattern, field_name, ())
        if not items:
            return f"💭 Keep exploring {pattern.name}. Every pattern gets easier with practice."
        return shape.format(item=items[0])

    def _pick(self, pool: Sequence):
        """uniform choice driven by self.rng. empty pool -> ''."""
        if not pool:
            return ""
        i = int(self.rng.random() * len(pool))
        return pool[min(i, len(pool) - 1)]

    # ------------------------------------------------------------
    # formatting
    # ------------------------------------------------------------

    def format(self, narrative: Narrative, kind: str = "markdown") -> str:
        return format_narrative(narrative, kind)

    def render_match(self, match, kind: str = "markdown", glyphs: bool = True,
                     variety: bool = False, registry=None) -> str:
        """one detection result as display text, after-example glyph-annotated."""
        pattern = match.pattern
        body = self.format(self.narrate(pattern, variety=variety), kind)
        after = pattern.after_example
        if glyphs and pattern.glyphs:
            after = (registry or REGISTRY).annotate(after, pattern.glyphs)
        header = f"{pattern.name} ({pattern.id}, {match.confidence:.0%}, line {match.start_line})"
        if kind == "plain":
            return f"{header}\n\n{body}\n\n{after}"
        if kind == "html":
            return (f"<section>\n<h3>{header}</h3>\n{body}\n"
                    f"<pre>{after}</pre>\n</section>")
        return f"### {header}\n\n{body}\n\n```rescript\n{after}\n```"


def format_narrative(narrative: Narrative, kind: str = "markdown") -> str:
    """render the five fields. "plain", "html", anything else is markdown."""
    if kind == "plain":
        return "\n\n".join([
            narrative.celebrate,
            narrative.minimize,
            narrative.better,
            f"Safety: {narrative.safety}",
            f"Example: {narrative.example}",
        ])

    if kind == "html":
        return "\n".join([
            '<div class="narrative">',
            f'  <p class="celebrate">{narrative.celebrate}</p>',
            f'  <p class="minimize">{narrative.minimize}</p>',
            f'  <p class="better">{narrative.better}</p>',
            f'  <p class="safety"><strong>Safety:</strong> {narrative.safety}</p>',
            f'  <p class="example"><strong>Example:</strong> <code>{narrative.example}</code></p>',
            "</div>",
        ])

    return "\n\n".join([
        f"**Celebrate:** {narrative.celebrate}",
        f"**Minimize:** {narrative.minimize}",
        f"**Better:** {narrative.better}",
        f"**Safety:** {narrative.safety}",
        f"**Example:** {narrative.example}",
    ])
