from __future__ import annotations


def render_dashboard_tab(
    *,
    st,
    alt,
    SKILLS_FILE: str,
    load_profile,
    top_skills,
    profile_stats,
    growth_frame,
    skills_frame,
    fetch_and_recommend,
    make_client,
) -> None:
    st.subheader("Contributor skill dashboard")

    username = st.text_input("GitHub username", value="Gupta-02", key="dashboard_user").strip()
    if not username:
        st.info("Enter a username to see their skill profile.")
        return

    profile, is_sample = load_profile(SKILLS_FILE, username)
    if is_sample:
        st.warning("No skill data for this user yet; showing sample data.")

    stats = profile_stats(profile)
    for col, (label, value) in zip(st.columns(len(stats)), stats.items()):
        with col:
            st.metric(label, value)

    c_skills, c_growth = st.columns(2)
    with c_skills:
        st.markdown("#### Top skills")
        skills_df = skills_frame(top_skills(profile, 10))
        if skills_df.empty:
            st.info("No skills recorded.")
        else:
            chart = (
                alt.Chart(skills_df)
                .mark_bar()
                .encode(
                    x=alt.X("level:Q", title="Skill level"),
                    y=alt.Y("skill:N", sort="-x", title=None),
                    tooltip=["skill", "level"],
                )
            )
            st.altair_chart(chart, use_container_width=True)

    with c_growth:
        st.markdown("#### Growth")
        growth_df = growth_frame(profile)
        if growth_df.empty:
            st.info("No growth history yet.")
        else:
            long_df = growth_df.melt(
                id_vars="date",
                value_vars=["prs", "skills"],
                var_name="series",
                value_name="value",
            )
            long_df["series"] = long_df["series"].map({"prs": "PRs Merged", "skills": "Skills Learned"})
            chart = (
                alt.Chart(long_df)
                .mark_line(point=True)
                .encode(
                    x=alt.X("date:T", title="Date"),
                    y=alt.Y("value:Q", title=None),
                    color=alt.Color("series:N", title=None),
                )
            )
            st.altair_chart(chart, use_container_width=True)

    st.markdown("#### Recommended issues")
    if is_sample:
        st.caption("Recommendations need a real skill profile.")
        return
    if st.button("Find issues for me", key="dashboard_recommend"):
        try:
            result = fetch_and_recommend(make_client(), username, SKILLS_FILE)
        except (RuntimeError, OSError, ValueError) as exc:
            st.error(f"Could not load recommendations: {exc}")
            return

        c_match, c_beginner = st.columns(2)
        with c_match:
            st.markdown("**Skill-matched issues**")
            for r in result.get("recommendations") or []:
                st.markdown(f"[#{r['number']}: {r['title']}]({r['url']})")
                st.caption(f"Matches: {', '.join(r['matchedSkills'])}")
        with c_beginner:
            st.markdown("**Beginner-friendly issues**")
            beginner = result.get("beginner")
            for b in beginner if isinstance(beginner, list) else []:
                st.markdown(f"[#{b['number']}: {b['title']}]({b['url']})")
                st.caption("Good first issue")
