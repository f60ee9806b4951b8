"""
Streamlit frontend for UH course search.

Calls GET http://localhost:8000/api/programs-courses and displays matching
courses as a table. A career goal or academic program widens the search
with related keywords and course prefixes.
"""

import os
import sys
from pathlib import Path

import requests
import streamlit as st
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

from careers.cip_mapping import (
    get_cip_codes_for_career,
    get_enhanced_keywords_for_career,
    has_career_mapping,
)
from careers.program_prefix import PROGRAM_PREFIX_MAP, get_prefixes_for_program
from etl.catalog import CAMPUSES

load_dotenv()

API_URL = os.getenv("API_URL", "http://localhost:8000/api/programs-courses")

st.set_page_config(page_title="UH Course Search", layout="centered")
st.title("UH Course Search")

st.markdown(
    """
Search courses across all ten University of Hawai‘i campuses.

### Quick start
1. Start backend API in another terminal: `python app/app.py`
2. Enter a query below (example: *data*)
3. Optionally pick campuses, a career goal, or a program
4. Click **Search**
"""
)

campus_names = {c.name: c.key for c in CAMPUSES}

query = st.text_input("Search query", placeholder="e.g. data")
campuses = st.multiselect("Campuses", list(campus_names))
career = st.text_input("Career goal (optional)", placeholder="e.g. Web Developer")
program = st.selectbox("Program (optional)", ["None"] + sorted(PROGRAM_PREFIX_MAP))
limit = st.slider("Max results", min_value=1, max_value=200, value=20)
submitted = st.button("Search")


if submitted:
    keywords: list[str] = []

    if career.strip():
        keywords.extend(get_enhanced_keywords_for_career(career))
        if has_career_mapping(career):
            st.caption("CIP codes: " + ", ".join(get_cip_codes_for_career(career)))
        else:
            st.caption("No CIP mapping for this career; searching its words only.")

    if program != "None":
        keywords.extend(get_prefixes_for_program(program) or [])

    params: list[tuple[str, str]] = [("limit", str(limit))]
    if query.strip():
        params.append(("q", query))
    params.extend(("keyword", k) for k in keywords)
    params.extend(("campus", campus_names[name]) for name in campuses)

    with st.spinner("Searching…"):
        try:
            resp = requests.get(API_URL, params=params, timeout=30)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.ConnectionError:
            st.error("Cannot reach the API. Start it with: python app/app.py")
            st.stop()
        except requests.exceptions.HTTPError as exc:
            st.error(f"API error: {exc}")
            st.stop()

    if data.get("message"):
        st.warning(data["message"])

    courses = data.get("results", [])
    if courses:
        st.subheader(f"{data.get('total', len(courses))} matching courses")
        rows = [
            {
                "Course": f"{c.get('course_prefix', '')} {c.get('course_number', '')}".strip(),
                "Title": c.get("course_title", ""),
                "Department": c.get("dept_name", ""),
                "Units": c.get("num_units", ""),
                "Campus": c.get("campus", ""),
            }
            for c in courses
        ]
        st.dataframe(rows, use_container_width=True, hide_index=True)
    elif not data.get("message"):
        st.info("No courses matched this search.")
