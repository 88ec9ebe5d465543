from __future__ import annotations


def _render_card(
    *,
    st,
    app,
    card,
    key_prefix: str,
    sanitize_key,
    stars_text,
    tech_badges,
    card_caption,
    format_timestamp_ms,
) -> None:
    project = card.project
    # key_prefix carries the slot index; sanitized titles alone can collide.
    key = f"{key_prefix}_{sanitize_key(project.title)}"

    with st.container(border=True):
        st.markdown(f"#### {project.title}")
        st.caption(card_caption(card))
        if project.description:
            st.write(project.description)
        if project.tech and app.view_mode == "card":
            st.markdown(tech_badges(project.tech))

        c_open, c_src, c_bm = st.columns(3)
        with c_open:
            st.link_button("Open", project.link)
        with c_src:
            st.link_button("Source", card.source_url)
        with c_bm:
            label = "Unbookmark" if card.bookmarked else "Bookmark"
            if st.button(label, key=f"{key}_bookmark"):
                now_bookmarked = app.toggle_bookmark(project)
                st.toast("Added to bookmarks" if now_bookmarked else "Removed from bookmarks")
                st.rerun()

        with st.expander(f"Rate \"{project.title}\""):
            for entry in app.reviews(project.title):
                icons = ("full",) * entry.rating + ("empty",) * (5 - entry.rating)
                when = format_timestamp_ms(entry.timestamp) or ""
                st.caption(f"{stars_text(icons)} {when}".strip())
                if entry.review:
                    st.write(entry.review)
            with st.form(f"{key}_rating_form", clear_on_submit=True):
                stars = st.radio("Stars", [1, 2, 3, 4, 5], index=None, horizontal=True, key=f"{key}_stars")
                review = st.text_area("Leave a review (optional)", key=f"{key}_review")
                if st.form_submit_button("Submit Rating"):
                    if stars is None:
                        st.warning("Pick a star rating first.")
                    else:
                        app.submit_rating(project.title, int(stars), review)
                        st.rerun()


def _render_pagination(*, st, app, view) -> None:
    if view.total_pages <= 1:
        return

    buttons = ["prev", *view.pagination, "next"]
    cols = st.columns(len(buttons))
    for col, item in zip(cols, buttons):
        with col:
            if item == "prev":
                if st.button("‹", key="page_prev", disabled=view.page == 1):
                    app.go_to_page(view.page - 1)
                    st.rerun()
            elif item == "next":
                if st.button("›", key="page_next", disabled=view.page == view.total_pages):
                    app.go_to_page(view.page + 1)
                    st.rerun()
            elif item == "...":
                st.markdown("…")
            else:
                is_current = item == view.page
                if st.button(
                    str(item),
                    key=f"page_{item}",
                    type="primary" if is_current else "secondary",
                    disabled=is_current,
                ):
                    app.go_to_page(int(item))
                    st.rerun()


def render_projects_tab(
    *,
    st,
    app,
    error: str | None,
    SORT_MODES: dict[str, str],
    VIEW_MODES: tuple[str, ...],
    sanitize_key,
    stars_text,
    tech_badges,
    card_caption,
    format_timestamp_ms,
) -> None:
    if app is None:
        st.error(error or "Failed to load projects. Please refresh.")
        return

    st.metric("Projects", app.project_count_label())

    c_search, c_cat, c_sort, c_view = st.columns([3, 2, 2, 1])
    with c_search:
        query = st.text_input("Search projects", value=app.engine.search_query, key="project_search").strip()
    with c_cat:
        categories = app.categories()
        category = st.selectbox(
            "Category",
            categories,
            index=categories.index(app.engine.category) if app.engine.category in categories else 0,
            format_func=lambda c: "All" if c == "all" else c.capitalize(),
            key="project_category",
        )
    with c_sort:
        modes = list(SORT_MODES)
        sort_mode = st.selectbox(
            "Sort",
            modes,
            index=modes.index(app.sort_mode),
            format_func=lambda m: SORT_MODES[m],
            key="project_sort",
        )
    with c_view:
        view_mode = st.radio("View", list(VIEW_MODES), index=list(VIEW_MODES).index(app.view_mode), key="project_view")

    # Setters reset paging, so only call them on actual changes.
    if query != app.engine.search_query:
        app.set_search_query(query)
    if category != app.engine.category:
        app.set_category(category)
    if sort_mode != app.sort_mode:
        app.set_sort_mode(sort_mode)
    if view_mode != app.view_mode:
        app.set_view_mode(view_mode)

    if st.button("🎲 Random project", key="random_project"):
        picked = app.random_project()
        if picked is not None:
            st.success(f"Try **{picked.title}**: {picked.link}")

    view = app.render()

    if view.is_empty:
        st.info("No projects match your search.")
        return

    st.caption(f"Showing page {view.page} of {view.total_pages} ({view.total_items} projects)")

    card_kwargs = dict(
        st=st,
        app=app,
        sanitize_key=sanitize_key,
        stars_text=stars_text,
        tech_badges=tech_badges,
        card_caption=card_caption,
        format_timestamp_ms=format_timestamp_ms,
    )
    if view.view_mode == "card":
        cols = st.columns(3)
        for i, card in enumerate(view.items):
            with cols[i % 3]:
                _render_card(card=card, key_prefix=f"card_{i}", **card_kwargs)
    else:
        for i, card in enumerate(view.items):
            _render_card(card=card, key_prefix=f"row_{i}", **card_kwargs)

    _render_pagination(st=st, app=app, view=view)
