# scrubbing/service/pipeline.py

"""Declarative recipe pipeline built on the Scrub engine.

A recipe names the table contents, matching options, and an ordered list
of steps. The same recipe can be applied to any number of inputs::

    recipe = load_recipe("slug.yaml")
    result = run_recipe("Front Brake  Pad", recipe)
"""

import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from scrubbing.core.domain import ScrubResult
from scrubbing.core.exceptions import ConfigurationError, ScrubError
from scrubbing.engine.scrub import Scrub

logger = logging.getLogger(__name__)

StepOp = Literal[
    "strip",
    "map_chars",
    "map_words",
    "translate_patterns",
    "apply_named",
    "ignore_case",
]


class RecipeStep(BaseModel):
    """One engine operation in a recipe."""

    op: StepOp
    pattern: Optional[str] = None
    name: Optional[str] = None
    replacement: str = ""
    separator: str = " "
    flag: bool = True
    enabled: bool = True

    @model_validator(mode="after")
    def check_arguments(self) -> "RecipeStep":
        """Ensure operations that need a pattern or a name have one."""
        if self.op == "strip" and self.pattern is None:
            raise ValueError("'strip' step requires a pattern")
        if self.op == "apply_named" and not self.name:
            raise ValueError("'apply_named' step requires a name")
        return self


class ScrubRecipe(BaseModel):
    """Table contents, options, and steps for a reusable scrub."""

    char_from: str = ""
    char_to: str = ""
    char_map: Dict[str, str] = Field(default_factory=dict)

    words: Dict[str, str] = Field(default_factory=dict)
    words_ignore_case: bool = False

    patterns: List[Tuple[str, str]] = Field(default_factory=list)
    named_patterns: Dict[str, str] = Field(default_factory=dict)

    ignore_case: Optional[bool] = None
    timeout_seconds: Optional[float] = None

    steps: List[RecipeStep] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_char_sequences(self) -> "ScrubRecipe":
        """Ensure the positional character sequences pair up."""
        if len(self.char_from) != len(self.char_to):
            raise ValueError("char_from and char_to must be the same length")
        return self


def load_recipe(path: Union[str, Path]) -> ScrubRecipe:
    """Reads and validates a YAML recipe.

    Args:
        path: Location of the recipe file

    Returns:
        Validated ScrubRecipe

    Raises:
        ConfigurationError: If the file is missing, unparsable, or invalid.
    """
    recipe_path = Path(path)

    if not recipe_path.exists():
        error_msg = f"Recipe not found: {recipe_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    try:
        with open(recipe_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to parse recipe {recipe_path}: {e}") from e

    return parse_recipe(data or {})


def parse_recipe(data: Dict) -> ScrubRecipe:
    """Validates an already-loaded recipe mapping.

    Raises:
        ConfigurationError: If the data does not describe a valid recipe.
    """
    try:
        recipe = ScrubRecipe.model_validate(data)
    except ValidationError as e:
        logger.error("Recipe validation failed", extra={"errors": e.errors()})
        raise ConfigurationError(f"Invalid recipe: {e}") from e

    logger.info(
        "Recipe loaded",
        extra={"step_count": len(recipe.steps), "pattern_count": len(recipe.patterns)},
    )
    return recipe


def build_engine(text: str, recipe: ScrubRecipe) -> Scrub:
    """Creates an engine configured from a recipe, no steps applied yet."""
    engine = Scrub(text)

    if recipe.char_from:
        engine.set_char_translator(recipe.char_from, recipe.char_to)
    engine.char_table.update(recipe.char_map)

    engine.set_word_translator(recipe.words, ignore_case=recipe.words_ignore_case)
    engine.set_pattern_list(recipe.patterns)
    engine.named_patterns.update(recipe.named_patterns)

    if recipe.ignore_case is not None:
        engine.ignore_case(recipe.ignore_case)
    if recipe.timeout_seconds is not None:
        engine.timeout = recipe.timeout_seconds

    return engine


def _apply_step(engine: Scrub, step: RecipeStep) -> None:
    if step.op == "strip":
        engine.strip(step.pattern)
    elif step.op == "map_chars":
        engine.map_chars()
    elif step.op == "map_words":
        engine.map_words(step.separator)
    elif step.op == "translate_patterns":
        engine.translate_patterns()
    elif step.op == "apply_named":
        engine.apply_named(step.name, step.replacement)
    elif step.op == "ignore_case":
        engine.ignore_case(step.flag)


def run_recipe(text: str, recipe: ScrubRecipe) -> ScrubResult:
    """Applies every enabled step of a recipe to the text, in order.

    Args:
        text: Input text to scrub
        recipe: Validated recipe

    Returns:
        ScrubResult with the scrubbed text and the steps applied

    Raises:
        ScrubError: Whatever the failing engine operation raised.
    """
    engine = build_engine(text, recipe)
    applied: List[str] = []

    logger.info(
        "Starting scrub",
        extra={"text_length": len(text), "step_count": len(recipe.steps)},
    )

    for index, step in enumerate(recipe.steps):
        if not step.enabled:
            continue

        try:
            _apply_step(engine, step)
        except ScrubError:
            logger.error(
                f"Recipe step {index} ({step.op}) failed",
                exc_info=True,
                extra={"text_length": len(text), "steps_applied": applied},
            )
            raise

        applied.append(step.op)

    return ScrubResult(
        original_text=text,
        scrubbed_text=engine.to_string(),
        steps=applied,
        metadata={
            "case_insensitive": engine.case_insensitive,
            "timeout_seconds": engine.timeout,
        },
    )
