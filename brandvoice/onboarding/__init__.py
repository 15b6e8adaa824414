"""
Onboarding wizards.

Fixed, linear step sequences for organization setup and tone-of-voice setup.
"""

from brandvoice.onboarding.steps import (
    ORG_ONBOARDING,
    TONE_ONBOARDING,
    OnboardingStep,
    StepSequence,
    get_next_org_step,
    get_org_step_index,
    get_prev_org_step,
    get_sequence,
)

__all__ = [
    "ORG_ONBOARDING",
    "TONE_ONBOARDING",
    "OnboardingStep",
    "StepSequence",
    "get_next_org_step",
    "get_org_step_index",
    "get_prev_org_step",
    "get_sequence",
]
