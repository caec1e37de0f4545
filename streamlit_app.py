"""
Streamlit UI for the Movie Store.
Calls the FastAPI server (default http://localhost:3000) to create movies and look them up by id.

Run API:   python -m scripts.serve
Run UI:    streamlit run streamlit_app.py
"""

# HTTP client to call the API
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Console logging
from loguru import logger  # console logger

# Settings provide the default API URL
from src.config import Settings  # env-driven settings

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Store", layout="centered")

# Main page title
st.title("🎬 Movie Store")

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", Settings.from_env().api_url).rstrip('/')  # where the API lives
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		if h.ok:
			st.success(f"API reachable. {h.json().get('movies', 0)} movies stored.")
		else:
			st.warning(f"API responded with HTTP {h.status_code}")
	except requests.RequestException as e:
		logger.warning(f"[UI] Health probe failed: {e}")
		st.error("API not reachable.")


def show_movie(movie: dict):
	"""Render one movie record."""
	verdict = "👍 good" if movie['was_good'] else "👎 not good"
	st.subheader(f"{movie['name']} ({movie['year']})")
	st.write(f"Verdict: {verdict}")
	st.code(movie['id'], language=None)  # easy to copy for lookups


# Create form
st.header("Add a movie")
with st.form("create_movie"):
	name = st.text_input("Name", placeholder="e.g., Inception")
	year = st.number_input("Year", min_value=0, max_value=65535, value=2010, step=1)
	was_good = st.checkbox("Was it good?", value=True)
	submitted = st.form_submit_button("Create", type="primary")

if submitted:
	try:
		resp = requests.post(
			f"{api_url}/movie",
			json={"name": name, "year": int(year), "was_good": was_good},
			timeout=10,
		)
		resp.raise_for_status()  # raise error if server responded with an error code
		st.success("Created.")
		show_movie(resp.json())
	except requests.RequestException as e:  # network/API errors
		st.error(f"API request failed: {e}")

st.divider()

# Lookup box
st.header("Find a movie by id")
movie_id = st.text_input("Movie id", placeholder="paste an id returned above")
if st.button("Look up") and movie_id.strip():
	try:
		resp = requests.get(f"{api_url}/movie/{movie_id.strip()}", timeout=10)
		if resp.status_code == 404:
			st.warning("No movie with that id.")
		else:
			resp.raise_for_status()
			show_movie(resp.json())
	except requests.RequestException as e:
		st.error(f"API request failed: {e}")
