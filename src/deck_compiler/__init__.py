"""
Deck Compiler

Compiles declarative slide-layout documents (or a fixed code review record)
into Google Slides API batch requests and applies them to a new or existing deck.
"""

__version__ = "0.1.0"

from .colors import (
    RgbColor,
    ColorLiteral,
    ColorName,
    ColorReference,
    DEFAULT_COLORS,
    resolve_color,
)

from .interpolate import (
    MISSING,
    interpolate_variables,
    get_nested_value,
)

from .config import (
    SlideConfig,
    SlideDefinition,
    SlideElement,
    SlideTheme,
    load_config,
    load_template,
    load_data,
)

from .review import (
    ReviewData,
    Verdict,
    CheckStatus,
    RiskLevel,
)

from .generator import (
    GenerationResult,
    compile_config,
    generate_slides_from_config,
    generate_slides_from_review,
)

from .gateway import (
    PresentationGateway,
    GoogleSlidesGateway,
)

from .errors import (
    DeckCompilerError,
    InputParseError,
    MissingArgumentError,
    NoInputError,
    AuthError,
)

__all__ = [
    # Colors
    'RgbColor',
    'ColorLiteral',
    'ColorName',
    'ColorReference',
    'DEFAULT_COLORS',
    'resolve_color',
    # Interpolation
    'MISSING',
    'interpolate_variables',
    'get_nested_value',
    # Config
    'SlideConfig',
    'SlideDefinition',
    'SlideElement',
    'SlideTheme',
    'load_config',
    'load_template',
    'load_data',
    # Review data
    'ReviewData',
    'Verdict',
    'CheckStatus',
    'RiskLevel',
    # Generation
    'GenerationResult',
    'compile_config',
    'generate_slides_from_config',
    'generate_slides_from_review',
    # Gateway
    'PresentationGateway',
    'GoogleSlidesGateway',
    # Errors
    'DeckCompilerError',
    'InputParseError',
    'MissingArgumentError',
    'NoInputError',
    'AuthError',
]
