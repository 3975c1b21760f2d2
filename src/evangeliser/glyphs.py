"""
glyphs.py - the glyph registry

A glyph is a symbol for a programming idea, independent of syntax.
    ◇ is "maybe there, maybe not" whether you write null checks or option<'a>.
    ▷ is "data flows left to right" whether you nest calls or use ->.

Every pattern category carries exactly three glyphs. The mapping lives in
a data table (CATEGORY_GLYPHS), checked when a registry is built, so adding
a category is a data change and a missing row fails at import, not at
render time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from evangeliser.categories import LEGEND_ORDER, PatternCategory, SemanticCategory
from evangeliser.errors import GlyphTableError

GLYPHS_PER_CATEGORY = 3


@dataclass(frozen=True)
class Glyph:
    """One symbol in the glyph vocabulary."""

    symbol: str
    name: str
    meaning: str
    semantic_category: SemanticCategory
    usage_example: str

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "meaning": self.meaning,
            "semanticCategory": self.semantic_category.value,
            "usageExample": self.usage_example,
        }


# ===========================================================================
# VOCABULARY
# ===========================================================================

_S = SemanticCategory

_CORE_DEFS = [
    # === SAFETY ===
    ("◇", "Option", "a value that may be absent, said out loud in the type",
     _S.SAFETY, "let name: option<string> = Some(\"Ada\")"),
    ("⊘", "Nothing", "absence handled at compile time, not at 3am",
     _S.SAFETY, "switch user { | None => \"guest\" | Some(u) => u.name }"),
    ("✓", "Result", "success or failure as a plain value, no throwing",
     _S.SAFETY, "let parsed: result<int, string> = Ok(42)"),
    ("τ", "Type", "a shape the compiler checks for you",
     _S.SAFETY, "type user = {name: string, age: int}"),

    # === TRANSFORMATION ===
    ("→", "Transform", "turns one value into a new one",
     _S.TRANSFORMATION, "let celsius = f => (f -. 32.0) *. 5.0 /. 9.0"),
    ("⇒", "Map", "applies a function to every element",
     _S.TRANSFORMATION, "numbers->Array.map(n => n * 2)"),
    ("λ", "Lambda", "a function as a value",
     _S.TRANSFORMATION, "let add = (a, b) => a + b"),

    # === FLOW ===
    ("▷", "Pipe", "data flows left to right through functions",
     _S.FLOW, "input->String.trim->String.toLowerCase"),
    ("⟳", "Async", "a computation that finishes later",
     _S.FLOW, "let data = await fetchUser(id)"),
    ("⑂", "Branch", "choose a path based on a value",
     _S.FLOW, "if isAdmin { grant() } else { deny() }"),

    # === STRUCTURE ===
    ("▦", "Record", "a fixed shape with named fields",
     _S.STRUCTURE, "let point = {x: 1.0, y: 2.0}"),
    ("⊕", "Variant", "exactly one of several tagged cases",
     _S.STRUCTURE, "type status = Loading | Done(string) | Failed"),
    ("▣", "Module", "a named boundary around related code",
     _S.STRUCTURE, "module Cart = { let total = items => ... }"),

    # === STATE ===
    ("❄", "Frozen", "a value that never changes after creation",
     _S.STATE, "let config = {debug: false} // immutable by default"),
    ("◉", "Ref", "an explicit, visible mutable cell",
     _S.STATE, "let count = ref(0); count := count.contents + 1"),

    # === DATA ===
    ("⋯", "Collection", "an ordered sequence of values",
     _S.DATA, "let names = [\"ada\", \"grace\"]"),
    ("⊏", "Unpack", "pull named parts out of a structure",
     _S.DATA, "let {name, age} = user"),
]

_EXTENDED_DEFS = [
    ("⊨", "Match", "every case handled, and the compiler checks it",
     _S.FLOW, "switch shape { | Circle(r) => ... | Square(s) => ... }"),
    ("⊥", "Failure", "an outcome that did not go to plan",
     _S.SAFETY, "Error(\"not found\")"),
    ("⇥", "Fallback", "the value used when nothing else is there",
     _S.SAFETY, "name->Option.getOr(\"anonymous\")"),
    ("∘", "Compose", "two functions glued into one",
     _S.TRANSFORMATION, "let slugify = s => s->String.trim->toKebab"),
    ("⊆", "Filter", "keep only the values that pass a test",
     _S.TRANSFORMATION, "users->Array.filter(u => u.active)"),
    ("Σ", "Fold", "many values reduced to one",
     _S.TRANSFORMATION, "prices->Array.reduce(0.0, (a, b) => a +. b)"),
    ("⇄", "Callback", "control handed to a function that calls you back",
     _S.FLOW, "button->addEventListener(\"click\", _ => save())"),
    ("⇣", "Import", "code brought in from another module",
     _S.STRUCTURE, "open Belt"),
    ("∀", "Generic", "one definition for every type",
     _S.STRUCTURE, "let identity: 'a => 'a = x => x"),
    ("⊞", "Merge", "a new structure made from old ones, originals untouched",
     _S.DATA, "let updated = {...user, name: \"Grace\"}"),
    ("❝", "Template", "text with values woven in",
     _S.DATA, "`Hello ${name}!`"),
]

CORE_GLYPHS: tuple[Glyph, ...] = tuple(
    Glyph(symbol=s, name=n, meaning=m, semantic_category=c, usage_example=u)
    for s, n, m, c, u in _CORE_DEFS
)

EXTENDED_GLYPHS: tuple[Glyph, ...] = tuple(
    Glyph(symbol=s, name=n, meaning=m, semantic_category=c, usage_example=u)
    for s, n, m, c, u in _EXTENDED_DEFS
)


# ===========================================================================
# CATEGORY -> GLYPH TABLE
# ===========================================================================

_P = PatternCategory

CATEGORY_GLYPHS: dict[PatternCategory, tuple[str, str, str]] = {
    _P.NULL_SAFETY: ("◇", "⊘", "⇥"),
    _P.ASYNC: ("⟳", "▷", "✓"),
    _P.ERROR_HANDLING: ("✓", "⊥", "⑂"),
    _P.ARRAY_OPERATIONS: ("⋯", "⇒", "⊆"),
    _P.CONDITIONALS: ("⑂", "⊨", "◇"),
    _P.DESTRUCTURING: ("⊏", "▦", "→"),
    _P.DEFAULTS: ("⇥", "◇", "⊘"),
    _P.FUNCTIONAL: ("λ", "∘", "→"),
    _P.TEMPLATES: ("❝", "→", "⋯"),
    _P.ARROW_FUNCTIONS: ("λ", "→", "∘"),
    _P.VARIANTS: ("⊕", "⊨", "τ"),
    _P.MODULES: ("▣", "⇣", "∀"),
    _P.TYPE_SAFETY: ("τ", "∀", "✓"),
    _P.IMMUTABILITY: ("❄", "⊞", "→"),
    _P.PATTERN_MATCHING: ("⊨", "⊕", "⑂"),
    _P.PIPE_OPERATOR: ("▷", "∘", "→"),
    _P.OOP_TO_FP: ("▦", "λ", "◉"),
    _P.CLASS_TO_RECORD: ("▦", "τ", "❄"),
    _P.PROMISE_CHAIN: ("⟳", "▷", "⊥"),
    _P.CALLBACKS: ("⇄", "⟳", "λ"),
    _P.DATA_MODELING: ("▦", "⊕", "τ"),
}


# ===========================================================================
# REGISTRY
# ===========================================================================

class GlyphRegistry:
    """Read-only glyph vocabulary plus the category -> glyph table.

    Built once, shared freely. Nothing here mutates after __init__.
    """

    def __init__(self, core: Iterable[Glyph] = CORE_GLYPHS,
                 extended: Iterable[Glyph] = EXTENDED_GLYPHS,
                 category_table: Mapping = CATEGORY_GLYPHS):
        self._glyphs = tuple(core) + tuple(extended)
        self._by_symbol: dict[str, Glyph] = {}
        for g in self._glyphs:
            if g.symbol in self._by_symbol:
                raise GlyphTableError(f"duplicate glyph symbol: {g.symbol}")
            self._by_symbol[g.symbol] = g
        self._table = _validate_table(category_table, self._by_symbol)

    def all_glyphs(self) -> list[Glyph]:
        """core first, then extended."""
        return list(self._glyphs)

    def by_symbol(self, symbol: str) -> Optional[Glyph]:
        return self._by_symbol.get(symbol)

    def by_category(self, semantic_category) -> list[Glyph]:
        cat = SemanticCategory.parse(semantic_category)
        return [g for g in self._glyphs if g.semantic_category is cat]

    def glyphs_for_pattern_category(self, category) -> tuple[str, ...]:
        """the three symbols for a pattern category. () for unknown names."""
        cat = PatternCategory.parse(category)
        if cat is None:
            return ()
        return self._table[cat]

    def annotate(self, code: str, symbols: Iterable[str]) -> str:
        """prepend one line of glyphs. the code itself is untouched."""
        return " ".join(symbols) + "\n" + code

    def legend(self) -> str:
        """markdown legend of every glyph, grouped by semantic category."""
        lines = ["# Glyph Legend", ""]
        for cat in LEGEND_ORDER:
            glyphs = self.by_category(cat)
            if not glyphs:
                continue
            lines.append(f"## {cat.value}")
            lines.append("")
            for g in glyphs:
                lines.append(f"- **{g.symbol} {g.name}**: {g.meaning}")
                lines.append(f"  - Example: `{g.usage_example}`")
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"


def _validate_table(table: Mapping, known: Mapping[str, Glyph]) -> dict:
    """check the table is total, three symbols per row, all symbols known."""
    resolved: dict[PatternCategory, tuple[str, ...]] = {}
    for key, symbols in table.items():
        cat = PatternCategory.parse(key)
        if cat is None:
            raise GlyphTableError(f"unknown pattern category in glyph table: {key}")
        symbols = tuple(symbols)
        if len(symbols) != GLYPHS_PER_CATEGORY:
            raise GlyphTableError(
                f"{cat.value} needs exactly {GLYPHS_PER_CATEGORY} glyphs, got {len(symbols)}"
            )
        unknown = [s for s in symbols if s not in known]
        if unknown:
            raise GlyphTableError(f"{cat.value} references unknown glyphs: {unknown}")
        resolved[cat] = symbols

    missing = [c.value for c in PatternCategory if c not in resolved]
    if missing:
        raise GlyphTableError(f"glyph table has no row for: {', '.join(missing)}")
    return resolved


# ===========================================================================
# DEFAULT REGISTRY + MODULE SHORTCUTS
# ===========================================================================

REGISTRY = GlyphRegistry()


def all_glyphs() -> list[Glyph]:
    return REGISTRY.all_glyphs()


def by_symbol(symbol: str) -> Optional[Glyph]:
    return REGISTRY.by_symbol(symbol)


def by_category(semantic_category) -> list[Glyph]:
    return REGISTRY.by_category(semantic_category)


def glyphs_for_pattern_category(category) -> tuple[str, ...]:
    return REGISTRY.glyphs_for_pattern_category(category)


def annotate(code: str, symbols: Iterable[str]) -> str:
    return REGISTRY.annotate(code, symbols)


def legend() -> str:
    return REGISTRY.legend()
