# frontend/components/landing.py
import streamlit as st


def render_landing(content: dict):
    if not content:
        st.info("Start the backend to load the home page.")
        return

    st.header(content.get("title", ""))
    st.markdown(content.get("tagline", ""))

    stats = content.get("stats", [])
    if stats:
        cols = st.columns(len(stats))
        for col, stat in zip(cols, stats):
            col.metric(stat["label"], stat["number"])

    st.subheader("Powerful Features")
    for feature in content.get("features", []):
        st.markdown(f"**{feature['title']}**: {feature['description']}")

    st.subheader("What Educators Say")
    for t in content.get("testimonials", []):
        st.markdown(f"{'⭐' * t.get('rating', 0)}  \n*\"{t['content']}\"*  \n**{t['name']}**, {t['role']}")
