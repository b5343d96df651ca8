# main.py

"""Streamlit web UI for the text-scrubbing engine.

Lets a user paste text and a YAML recipe, then shows the scrubbed output
along with the steps that were applied.
"""

import streamlit as st
import logging
import yaml

from scrubbing.core.exceptions import ScrubError
from scrubbing.core.loader import PatternLoader
from scrubbing.logging_config import configure_logging
from scrubbing.service.pipeline import parse_recipe, run_recipe

configure_logging()

logger = logging.getLogger(__name__)

DEFAULT_RECIPE = """\
char_from: "ŠŒŽšœžŸ¥µÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØÙÚÛÜÝßàáâãäåæçèéêëìíîïðñòóôõöøùúûüýÿ¡¿"
char_to:   "SOZsozYYuAAAAAAACEEEEIIIIDNOOOOOOUUUUYsaaaaaaaceeeeiiiionoooooouuuuyy  "
words:
  chevrolet: Ford
  dodge: Mercedes
  mazda: BMW
words_ignore_case: true
patterns:
  - ["BMW", "Fiat"]
  - ['\\s+', " "]
  - ['^\\s*|\\s*$', ""]
steps:
  - op: strip
    pattern: "[,]"
  - op: map_chars
  - op: map_words
  - op: translate_patterns
"""

DEFAULT_TEXT = (
    "¿¡Señor, the Chevrolet guys don't like     Dodge     guys, "
    "and no one likes MaZdA, Ola Senor?!    "
)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text and a
    recipe from the user, runs the recipe, and displays the scrubbed
    output along with basic status information.
    """
    st.set_page_config(layout="wide", page_title="Text Scrubber", page_icon="🧽")

    st.title("Text Scrubber")
    st.markdown(
        "Normalize free-form text with character, word and pattern translation steps."
    )
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input")
        text_input = st.text_area("Source Text", value=DEFAULT_TEXT, height=200)
        recipe_input = st.text_area("Recipe (YAML)", value=DEFAULT_RECIPE, height=400)

    with col2:
        st.subheader("Scrubbed Output")

        if st.button("Scrub", type="primary"):
            try:
                recipe = parse_recipe(yaml.safe_load(recipe_input) or {})
                result = run_recipe(text_input, recipe)

            except yaml.YAMLError as e:
                st.error(f"Recipe is not valid YAML: {e}")
                logger.warning("Recipe YAML rejected", extra={"error": str(e)})

            except ScrubError as e:
                st.error(f"Scrub failed: {e}")
                logger.error(
                    "Scrub returned error status",
                    extra={"status": "failed", "text_length": len(text_input)},
                )

            else:
                st.text_area("Result", value=result.scrubbed_text, height=200)
                st.success(f"Applied {len(result.steps)} steps.")
                st.json(result.metadata)

                logger.info(
                    "Scrub successful",
                    extra={"text_length": len(text_input), "steps": result.steps},
                )

    with st.sidebar:
        st.header("Named Patterns")
        st.markdown("Use these with an `apply_named` step:")
        for name, pattern in PatternLoader.get_instance().get_patterns().items():
            st.code(f"{name}: {pattern}", language=None)


if __name__ == "__main__":
    main()
