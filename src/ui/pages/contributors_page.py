from __future__ import annotations


def render_contributors_tab(
    *,
    st,
    get_ui_state,
    load_contributors,
    make_client,
    contributors_frame,
) -> None:
    st.subheader("Contributors")

    state = get_ui_state()["contributors"]
    if "result" not in state or st.button("Refresh contributors"):
        with st.spinner("Fetching contributors..."):
            state["result"] = load_contributors(make_client())

    result = state["result"]
    if result.error:
        st.error(result.error)
        return
    if not result.contributors:
        st.info("No contributors yet.")
        return

    df = contributors_frame(result.contributors)
    st.dataframe(
        df,
        column_config={
            "avatar_url": st.column_config.ImageColumn("Avatar"),
            "html_url": st.column_config.LinkColumn("Profile"),
            "login": "Login",
            "contributions": st.column_config.NumberColumn("Commits"),
        },
        hide_index=True,
    )
