"""Design — attribute-entry record, parsing, validation and resolution."""

from .models import RailingDesign
from .parsing import parse_design, parse_path
from .resolution import PANEL_TYPES, strategy_for, resolve_parameters, place_design
from .validation import validate_design

__all__ = [
    # Models
    "RailingDesign",
    # Parsing / Validation / Resolution
    "parse_design", "parse_path", "validate_design",
    "PANEL_TYPES", "strategy_for", "resolve_parameters", "place_design",
]
