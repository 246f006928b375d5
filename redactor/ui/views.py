"""Presentation for the redaction UI.

Each function takes the Streamlit module as ``st`` and renders one screen.
No business logic lives here; buttons call back into RedactionSession.
"""

from __future__ import annotations

from redactor.jobs.models import SelectedFile
from redactor.ui.state import RedactionSession

TITLE = "PII Redactor"
FOOTER = "A Privacy-Preserving Redaction Service"


def render_header(*, st) -> None:
    st.title(f"🛡️ {TITLE}")


def render_footer(*, st) -> None:
    st.divider()
    st.caption(FOOTER)


def render_file_picker(
    *,
    st,
    session: RedactionSession,
    allowed_types: list[str],
) -> None:
    uploaded = st.file_uploader(
        "Drag & drop your file here, or click to browse",
        type=allowed_types,
        accept_multiple_files=False,
        key=f"upload_{session.generation}",
        help=f"Supports only {', '.join('.' + t for t in allowed_types)} for now",
    )
    if uploaded is None:
        session.clear_file()
    else:
        session.select_file(SelectedFile.from_upload(uploaded))

    if session.selected_file is not None:
        st.markdown(f"📄 **{session.selected_file.name}**")

    st.button(
        "Redact File",
        type="primary",
        disabled=session.selected_file is None,
        on_click=session.submit,
    )


def render_processing(*, st) -> None:
    st.subheader("Processing File")
    st.write("Redacting PII, please wait a moment...")


def render_result(*, st, session: RedactionSession) -> None:
    handle = session.download_handle
    st.success("Redaction Complete")
    st.write("Your file is ready to be downloaded.")
    if handle is not None and not handle.revoked:
        st.download_button(
            "Download File",
            data=handle.data,
            file_name=handle.file_name,
            mime=handle.mime_type,
        )
    st.button("Process Another File", on_click=session.reset)
