"""
brandvoice domain enums.

All enums are Django TextChoices. Rule enums are stored as UPPERCASE strings
so exported rule sets keep the values the editor and prompt builder expect.
"""

from django.db import models


class RuleType(models.TextChoices):
    """What aspect of copy a rule governs."""
    LANGUAGE_LOCALE = "LANGUAGE_LOCALE", "Language & Locale"
    GRAMMAR_STYLE = "GRAMMAR_STYLE", "Grammar & Style"
    TONE_VOICE = "TONE_VOICE", "Tone & Voice"
    TERMINOLOGY = "TERMINOLOGY", "Terminology"
    FORBIDDEN_WORDS = "FORBIDDEN_WORDS", "Forbidden Words"
    FORMATTING = "FORMATTING", "Formatting"
    INCLUSIVE_LANGUAGE = "INCLUSIVE_LANGUAGE", "Inclusive Language"
    LEGAL_COMPLIANCE = "LEGAL_COMPLIANCE", "Legal Compliance"
    CONTENT_PATTERNS = "CONTENT_PATTERNS", "Content Patterns"
    CUSTOM = "CUSTOM", "Custom"


class RuleStatus(models.TextChoices):
    """
    Rule lifecycle status.

    Only ACTIVE rules take part in brand rule resolution and linting.
    """
    DRAFT = "DRAFT", "Draft"
    ACTIVE = "ACTIVE", "Active"
    DEPRECATED = "DEPRECATED", "Deprecated"


class RuleScope(models.TextChoices):
    """Where a rule applies."""
    GLOBAL = "GLOBAL", "Global"
    SURFACE = "SURFACE", "Surface"
    CHANNEL = "CHANNEL", "Channel"
    ASSET = "ASSET", "Asset"
    INTEGRATION = "INTEGRATION", "Integration"


class RuleSeverity(models.TextChoices):
    INFO = "INFO", "Info"
    MINOR = "MINOR", "Minor"
    MAJOR = "MAJOR", "Major"
    CRITICAL = "CRITICAL", "Critical"


class EnforcementLevel(models.TextChoices):
    SUGGEST = "SUGGEST", "Suggest"
    WARN = "WARN", "Warn"
    BLOCK = "BLOCK", "Block"


class DetectorKind(models.TextChoices):
    """
    Detector kinds stored in Rule.detectors.

    REGEX and DICTIONARY are evaluated in-process by the rule evaluator.
    The LLM kinds are applied by the copy generation layer, and the crawler /
    parser kinds by ingestion; the evaluator yields no findings for them.
    """
    REGEX = "REGEX", "Regex"
    DICTIONARY = "DICTIONARY", "Dictionary"
    STYLE_CHECK = "STYLE_CHECK", "Style Check"
    LLM_CLASSIFIER = "LLM_CLASSIFIER", "LLM Classifier"
    LLM_REWRITE = "LLM_REWRITE", "LLM Rewrite"
    LINK_CRAWLER = "LINK_CRAWLER", "Link Crawler"
    DOC_PARSER = "DOC_PARSER", "Doc Parser"


class RuleSource(models.TextChoices):
    """How a rule was created."""
    TEMPLATE = "template", "Template"
    MANUAL = "manual", "Manual"
    IMPORT = "import", "Import"


class MembershipRole(models.TextChoices):
    """Role of a user within an organization."""
    OWNER = "owner", "Owner"
    ADMIN = "admin", "Admin"
    MEMBER = "member", "Member"
