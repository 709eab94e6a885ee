"""Recipe steps.

Provides:
- Step: base class with the train/apply/describe/render contract
- Step registry: registration and lookup of step classes by type name
- Built-in steps: tokenize, stem
"""

# Registry must be imported first (step modules use the register_step decorator)
from textprep.steps.base import Step
from textprep.steps.registry import (
    clear_registry,
    create_step,
    get_step_class,
    list_step_types,
    register_step,
)

# Step modules register themselves via @register_step
from textprep.steps.stem import StemStep
from textprep.steps.stemmers import list_stemmers, resolve_stemmer, snowball_stem
from textprep.steps.tokenize import TokenizeStep

__all__ = [
    # Base
    "Step",
    # Registry
    "register_step",
    "get_step_class",
    "create_step",
    "list_step_types",
    "clear_registry",
    # Steps
    "StemStep",
    "TokenizeStep",
    # Stemmers
    "resolve_stemmer",
    "snowball_stem",
    "list_stemmers",
]
