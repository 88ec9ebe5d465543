from __future__ import annotations

DEFAULT_MARKDOWN = """# Markdown preview

Type on the left, see HTML on the right.

- **bold**, *italic*, `code`
- line breaks are kept
"""


def render_markdown_tab(*, st, render_markdown) -> None:
    st.subheader("Markdown editor")

    c_input, c_preview = st.columns(2)
    with c_input:
        text = st.text_area("Markdown", value=DEFAULT_MARKDOWN, height=400, key="markdown_input")
    with c_preview:
        st.markdown("**Preview**")
        st.html(render_markdown(text))
