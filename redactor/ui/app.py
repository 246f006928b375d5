"""Streamlit entry script for the redaction UI.

Run with ``streamlit run redactor/ui/app.py`` or the ``redactor-ui`` command.
"""

from __future__ import annotations

import streamlit as st

from redactor.config.settings import ConfigurationError, Settings
from redactor.jobs.runner import RedactionJobRunner, build_runner
from redactor.logging.logger import Log
from redactor.ui.state import AppState, get_session
from redactor.ui.views import (
    render_file_picker,
    render_footer,
    render_header,
    render_processing,
    render_result,
)


@st.cache_resource
def _get_runner(_settings: Settings) -> RedactionJobRunner:
    # One runner (and storage client) per server process.
    return build_runner(_settings)


def main() -> None:
    settings = Settings()
    Log.configure(settings.log_level)
    st.set_page_config(page_title="PII Redactor", page_icon="🛡️")
    render_header(st=st)

    try:
        runner = _get_runner(settings)
    except ConfigurationError as exc:
        Log.error(f"Configuration error: {exc}")
        st.error(str(exc))
        st.stop()
        return

    session = get_session(st.session_state, settings.download_file_name)
    error = session.take_error()
    if error:
        st.error(error)

    if session.state is AppState.PROCESSING:
        render_processing(st=st)
        with st.spinner("Waiting for the redaction pipeline..."):
            session.process(runner)
        st.rerun()
    elif session.state is AppState.COMPLETE:
        render_result(st=st, session=session)
    else:
        render_file_picker(
            st=st,
            session=session,
            allowed_types=settings.allowed_file_types,
        )

    render_footer(st=st)


if __name__ == "__main__":
    main()
