"""
Onboarding step sequencing.

Both wizards are immutable tuples built at import time. Step identity is the
step id string; an id that is not in the sequence (typically a malformed
route parameter) has index -1 and no next or previous step. Sequences never
wrap around.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OnboardingStep:
    """
    One wizard step.

    rule_key names the rule the step configures (tone wizard only).
    """

    id: str
    title: str
    description: str
    rule_key: str = ""


class StepSequence:
    """An ordered, immutable list of onboarding steps."""

    def __init__(self, name: str, steps: tuple[OnboardingStep, ...]):
        self.name = name
        self._steps = tuple(steps)

    def __iter__(self):
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> OnboardingStep:
        return self._steps[index]

    @property
    def steps(self) -> tuple[OnboardingStep, ...]:
        return self._steps

    def step_index(self, step_id: str) -> int:
        """Zero-based position of step_id, or -1 if unknown."""
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        return -1

    def get_step(self, step_id: str) -> OnboardingStep | None:
        index = self.step_index(step_id)
        if index == -1:
            return None
        return self._steps[index]

    def next_step(self, step_id: str) -> OnboardingStep | None:
        """Step after step_id; None for an unknown id or the last step."""
        index = self.step_index(step_id)
        if index == -1 or index == len(self._steps) - 1:
            return None
        return self._steps[index + 1]

    def prev_step(self, step_id: str) -> OnboardingStep | None:
        """Step before step_id; None for an unknown id or the first step."""
        index = self.step_index(step_id)
        if index <= 0:
            return None
        return self._steps[index - 1]


# =============================================================================
# ORGANIZATION ONBOARDING
# =============================================================================

ORG_ONBOARDING = StepSequence(
    "org",
    (
        OnboardingStep(
            id="organization",
            title="Organisation details",
            description="Tell us about your organisation.",
        ),
        OnboardingStep(
            id="locale",
            title="Language and locale",
            description="Choose the primary language and region for your organisation.",
        ),
        OnboardingStep(
            id="brand",
            title="Create your first brand",
            description="Set up your first brand to get started with tone rules.",
        ),
        OnboardingStep(
            id="summary",
            title="Review",
            description="Review your organisation setup and get started.",
        ),
    ),
)


# =============================================================================
# TONE OF VOICE ONBOARDING
# =============================================================================

TONE_ONBOARDING = StepSequence(
    "tone",
    (
        OnboardingStep(
            id="locale",
            rule_key="tone.locale",
            title="Language and locale",
            description="Choose the language and region your brand primarily writes in.",
        ),
        OnboardingStep(
            id="formality",
            rule_key="tone.formality",
            title="Formality",
            description="How formal should your brand sound?",
        ),
        OnboardingStep(
            id="confidence",
            rule_key="tone.confidence",
            title="Confidence",
            description="How confidently should your brand speak?",
        ),
        OnboardingStep(
            id="directness",
            rule_key="tone.directness",
            title="Directness",
            description="How directly should your brand communicate?",
        ),
        OnboardingStep(
            id="enthusiasm",
            rule_key="tone.enthusiasm",
            title="Enthusiasm",
            description="How enthusiastic should your brand sound?",
        ),
        OnboardingStep(
            id="humour",
            rule_key="tone.humour",
            title="Humour",
            description="Should your brand use humour?",
        ),
        OnboardingStep(
            id="empathy",
            rule_key="tone.empathy",
            title="Empathy",
            description="Should your brand use empathetic phrasing?",
        ),
        OnboardingStep(
            id="custom-variant",
            rule_key="tone.custom_variant",
            title="Custom tone variant",
            description="Add any specific tone characteristics unique to your brand.",
        ),
        OnboardingStep(
            id="summary",
            title="Review",
            description="Review your tone of voice settings.",
        ),
    ),
)


SEQUENCES = {
    ORG_ONBOARDING.name: ORG_ONBOARDING,
    TONE_ONBOARDING.name: TONE_ONBOARDING,
}


def get_sequence(flow: str) -> StepSequence | None:
    """Wizard by name ("org" or "tone"), or None."""
    return SEQUENCES.get(flow)


# Organization wizard shortcuts, used by the onboarding pages.

def get_org_step_index(step_id: str) -> int:
    return ORG_ONBOARDING.step_index(step_id)


def get_next_org_step(step_id: str) -> OnboardingStep | None:
    return ORG_ONBOARDING.next_step(step_id)


def get_prev_org_step(step_id: str) -> OnboardingStep | None:
    return ORG_ONBOARDING.prev_step(step_id)
