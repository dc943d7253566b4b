# main.py

"""Streamlit web UI for the Morse code translator.

Provides a simple interface to convert text to Morse code and back using
configurable delimiters and an unknown-symbol policy.
"""

import streamlit as st
import logging

from morsecode.core.definitions import Direction, UnknownHandling
from morsecode.core.domain import TranslationConfig, TranslationResult
from morsecode.logging_config import configure_logging
from morsecode.service.config import settings
from morsecode.service.pipeline import decode_morse, encode_text

logger = logging.getLogger(__name__)

DIRECTION_LABELS = {
    Direction.ENCODE: "Text → Morse",
    Direction.DECODE: "Morse → Text",
}

POLICY_LABELS = {
    UnknownHandling.THROW_ERROR: "Reject input",
    UnknownHandling.REPLACE: "Replace with placeholder",
    UnknownHandling.IGNORE: "Skip silently",
}


def build_config(
    unknown_handling: UnknownHandling,
    replacement_char: str,
    preserve_case: bool,
    letter_delimiter: str,
    word_delimiter: str,
) -> TranslationConfig:
    """Assembles a TranslationConfig from form values."""
    return TranslationConfig(
        unknown_handling=unknown_handling,
        replacement_char=replacement_char,
        preserve_case=preserve_case,
        letter_delimiter=letter_delimiter,
        word_delimiter=word_delimiter,
    )


def translate(direction: str, text: str, config: TranslationConfig) -> TranslationResult:
    """Dispatches the form input to the matching pipeline entry point."""
    if direction == Direction.ENCODE:
        return encode_text(text, config)
    return decode_morse(text, config)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, collects the translation
    options, invokes the pipeline, and displays the output along with
    status information.
    """
    st.set_page_config(layout="wide", page_title="Morse Code Translator")

    st.title("Morse Code Translator")
    st.markdown("Convert plain text to International Morse code and back.")
    st.markdown("---")

    with st.sidebar:
        st.header("Options")
        policy = st.selectbox(
            "Unknown symbols",
            options=list(POLICY_LABELS),
            index=list(POLICY_LABELS).index(settings.unknown_handling),
            format_func=POLICY_LABELS.get,
        )
        replacement_char = st.text_input("Placeholder", value=settings.replacement_char)
        preserve_case = st.checkbox("Preserve case", value=settings.preserve_case)
        letter_delimiter = st.text_input(
            "Letter delimiter", value=settings.letter_delimiter
        )
        word_delimiter = st.text_input("Word delimiter", value=settings.word_delimiter)

    direction = st.radio(
        "Direction",
        options=list(DIRECTION_LABELS),
        format_func=DIRECTION_LABELS.get,
        horizontal=True,
    )

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input")
        text_input = st.text_area("Source", height=300)

    with col2:
        st.subheader("Output")

        if st.button("Translate", type="primary"):
            config = build_config(
                policy, replacement_char, preserve_case, letter_delimiter, word_delimiter
            )
            result = translate(direction, text_input, config)

            if not result.ok:
                st.error(f"Translation failed: {result.metadata['error']}")
                logger.error(
                    "Translation returned error status",
                    extra={"status": "failed", "input_length": len(text_input)},
                )
            else:
                st.text_area("Result", value=result.output_text, height=300)
                st.success("Translation complete.")


if __name__ == "__main__":
    configure_logging(settings.log_level)
    main()
