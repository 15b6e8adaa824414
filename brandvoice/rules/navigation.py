"""
Rule category navigation.

Maps a rule category to the ordered rule pages shown in the secondary
navigation. The first entry of a category is where a bare category route
lands. Keys match the seeded rule keys.

All navigation lists are immutable tuples; nothing registers entries at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleNavItem:
    key: str
    label: str
    slug: str


def _nav(*entries: tuple[str, str, str]) -> tuple[RuleNavItem, ...]:
    return tuple(RuleNavItem(key=key, label=label, slug=slug) for key, label, slug in entries)


TONE_RULE_NAV = _nav(
    ("tone.locale", "Language and locale", "locale"),
    ("tone.formality", "Formality", "formality"),
    ("tone.confidence", "Confidence vs caution", "confidence"),
    ("tone.directness", "Directness", "directness"),
    ("tone.enthusiasm", "Enthusiasm", "enthusiasm"),
    ("tone.humour", "Humour", "humour"),
    ("tone.empathy", "Empathy", "empathy"),
    ("tone.personality.exclude_slang", "Avoid slang", "avoid-slang"),
    ("tone.personality.exclude_emoji", "Avoid emojis", "avoid-emoji"),
    ("tone.personality.exclude_exclamation", "Avoid exclamation marks", "avoid-exclamation"),
    ("tone.personality.exclude_rhetorical", "Avoid rhetorical questions", "avoid-rhetorical"),
    ("tone.sentence.prefer_short", "Prefer short sentences", "prefer-short-sentences"),
    ("tone.sentence.one_idea", "One idea per sentence", "one-idea-per-sentence"),
    ("tone.sentence.use_contractions", "Use contractions", "use-contractions"),
    ("tone.sentence.active_voice", "Active voice only", "active-voice"),
    ("tone.ui.buttons_start_verbs", "Buttons start with verbs", "buttons-start-verbs"),
    ("tone.ui.use_select_not_click", "Use 'select' instead of 'click'", "use-select-not-click"),
    ("tone.ui.use_view_not_see", "Use 'view' instead of 'see'", "use-view-not-see"),
    ("tone.perspective.second_person", "Use second person perspective", "second-person"),
    ("tone.boundaries.no_hype", "No hype", "no-hype"),
    ("tone.boundaries.no_fear", "No fear", "no-fear"),
)

GRAMMAR_RULE_NAV = _nav(
    ("grammar.active_voice", "Active voice", "active-voice"),
    ("grammar.select", "Select", "select"),
    ("grammar.perspective", "Perspective", "perspective"),
    ("grammar.cases", "Sentence case", "sentence-case"),
    ("grammar.acronyms", "Acronyms and abbreviations", "acronyms"),
    ("grammar.contractions", "Contractions", "contractions"),
    ("grammar.full_stops", "Full stops", "full-stops"),
    ("grammar.exclamation_marks", "Exclamation marks", "exclamation-marks"),
    ("grammar.emoji", "Emoji", "emoji"),
    ("grammar.ampersands", "Ampersands", "ampersands"),
    ("grammar.brackets", "Brackets", "brackets"),
    ("grammar.bullets", "Bulleted lists", "bulleted-lists"),
    ("grammar.numbers", "Numbers", "numbers"),
    ("grammar.currencies", "Currencies", "currencies"),
    ("grammar.percentages", "Percentages", "percentages"),
    ("grammar.dates", "Dates", "dates"),
    ("grammar.dashes", "Dashes", "dashes"),
    ("grammar.slashes", "Slashes", "slashes"),
    ("grammar.ellipses", "Ellipses", "ellipses"),
    ("grammar.email", "Email", "email"),
    ("grammar.wifi", "Wi-Fi", "wifi"),
    ("grammar.dropdown", "Dropdown", "dropdown"),
    ("grammar.driver_licence", "Driver licence", "driver-licence"),
    ("grammar.text", "Text", "text"),
    ("grammar.time", "Time", "time"),
    ("grammar.oxford_comma", "Oxford comma", "oxford-comma"),
    ("grammar.change", "Change", "change"),
    ("grammar.choose", "Choose", "choose"),
    ("grammar.countries", "Countries", "countries"),
    ("grammar.edit", "Edit", "edit"),
    ("grammar.eg", "e.g.", "eg"),
    ("grammar.etc", "etc.", "etc"),
    ("grammar.login", "Login / Log in", "login"),
    ("grammar.markup", "Markup / Mark up", "markup"),
    ("grammar.view", "View", "view"),
    ("grammar.hyphenation", "Hyphenation", "hyphenation"),
    ("grammar.quotation_marks", "Quotation marks", "quotation-marks"),
    ("grammar.apostrophes", "Apostrophes", "apostrophes"),
    ("grammar.semicolons_colons", "Semicolons and colons", "semicolons-colons"),
    ("grammar.capitalization", "Capitalization", "capitalization"),
    ("grammar.possessives", "Common possessive errors", "possessives"),
    ("grammar.technical_terms", "Technical terms", "technical-terms"),
    ("grammar.abbreviations", "Abbreviations with periods", "abbreviations"),
    ("grammar.parallel_structure", "Parallel structure", "parallel-structure"),
    ("grammar.comma_usage", "Comma usage", "comma-usage"),
)

NUMBERS_RULE_NAV = _nav(
    ("numbers.use_numerals", "Use numerals", "use-numerals"),
    ("numbers.large_abbreviations", "Large number abbreviations", "large-abbreviations"),
    ("numbers.ranges", "Ranges", "ranges"),
    ("dates.format", "Date format", "date-format"),
    ("dates.include_day_name", "Include day name", "include-day-name"),
    ("time.format", "Time format", "time-format"),
    ("currency.naming", "Currency naming", "currency-naming"),
    ("currency.formatting", "Currency formatting", "currency-formatting"),
    ("currency.symbols", "Currency symbols", "currency-symbols"),
)

# Terminology is managed through the preferred-terms and forbidden-words
# tabs, so it has no per-rule pages.
TERMINOLOGY_RULE_NAV: tuple[RuleNavItem, ...] = ()

RULE_NAV_BY_CATEGORY = {
    "tone": TONE_RULE_NAV,
    "grammar": GRAMMAR_RULE_NAV,
    "numbers": NUMBERS_RULE_NAV,
    "terminology": TERMINOLOGY_RULE_NAV,
}


def get_rule_nav_for_category(category: str) -> tuple[RuleNavItem, ...]:
    """Ordered nav entries for a category; empty for unknown categories."""
    return RULE_NAV_BY_CATEGORY.get(category, ())


def default_rule_slug(category: str) -> str | None:
    """
    Slug a bare category route should redirect to.

    None when the category has no entries, in which case the caller must
    not redirect.
    """
    nav = get_rule_nav_for_category(category)
    if not nav:
        return None
    return nav[0].slug


def get_rule_by_slug(category: str, slug: str) -> RuleNavItem | None:
    for item in get_rule_nav_for_category(category):
        if item.slug == slug:
            return item
    return None


def get_rule_by_key(category: str, key: str) -> RuleNavItem | None:
    for item in get_rule_nav_for_category(category):
        if item.key == key:
            return item
    return None
