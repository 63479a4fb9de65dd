#file: frontend/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import logging
import streamlit as st
from streamlit_autorefresh import st_autorefresh

st.set_page_config(page_title="Air Quality Monitor", page_icon="🌍", layout="wide")

from frontend.config import DEFAULT_LOCATION, REFRESH_INTERVAL_SECONDS, WAQI_TOKEN
from frontend.data_fetch import fetch_location, fetch_place_name
from frontend.errors import DataError, InvalidCredential
from frontend.history import synthesize_history
from frontend.models import Location
from frontend.ui_elements import display_aqi_card, display_map, display_pollutants, display_trend_chart
from frontend.waqi_api import fetch_air_quality


@st.cache_data(ttl = REFRESH_INTERVAL_SECONDS, show_spinner = "Loading air quality data...")
def load_air_quality(latitude, longitude, token) :
    """Fetch the current reading and its synthetic history, cached for one refresh interval."""
    reading = fetch_air_quality(Location(latitude = latitude, longitude = longitude), token)
    return reading, synthesize_history(reading)


def notify(error) :
    st.toast(error.message, icon = "⚠️")


# Refresh every few minutes; the cache above expires on the same interval
st_autorefresh(interval = REFRESH_INTERVAL_SECONDS * 1000, key = "aqi_refresh")

if "waqi_api_key" not in st.session_state :
    st.session_state.waqi_api_key = WAQI_TOKEN
if "location" not in st.session_state :
    st.session_state.location = None

st.title("Air Quality Monitor")

with st.sidebar :
    token_input = st.text_input("WAQI API token", value = st.session_state.waqi_api_key, type = "password")
    if token_input != st.session_state.waqi_api_key :
        st.session_state.waqi_api_key = token_input.strip()

    with st.form("location_search") :
        query = st.text_input("Search location", placeholder = "e.g. Warsaw")
        submitted = st.form_submit_button("Search")

    if submitted :
        try :
            st.session_state.location = asyncio.run(fetch_location(query))
        except DataError as e :
            notify(e)

    with st.expander("Use coordinates") :
        latitude = st.number_input("Latitude", min_value = -90.0, max_value = 90.0, value = DEFAULT_LOCATION.latitude, format = "%.4f")
        longitude = st.number_input("Longitude", min_value = -180.0, max_value = 180.0, value = DEFAULT_LOCATION.longitude, format = "%.4f")
        if st.button("Show") :
            st.session_state.location = Location(latitude = latitude, longitude = longitude)

location = st.session_state.location
if location is None :
    st.info(f"Showing {DEFAULT_LOCATION.name}. Search for a place in the sidebar.")
    location = DEFAULT_LOCATION
elif not location.name :
    try :
        name = asyncio.run(fetch_place_name(location))
    except DataError as e :
        logging.warning(f"Reverse geocoding failed: {e.message}")
        name = None
    if name :
        location = location.model_copy(update = {"name" : name})
        st.session_state.location = location

if not st.session_state.waqi_api_key :
    st.warning("Please enter your WAQI API token in the sidebar.")
    st.stop()

try :
    reading, history = load_air_quality(location.latitude, location.longitude, st.session_state.waqi_api_key)
except InvalidCredential :
    st.session_state.waqi_api_key = ""
    st.toast("Invalid API key. Please check and try again.", icon = "⚠️")
    st.error("Failed to load air quality data")
    st.stop()
except DataError as e :
    notify(e)
    st.error("Failed to load air quality data")
    st.caption("Please try again later")
    st.stop()

if location.name :
    st.subheader(location.name)

col1, col2 = st.columns([1, 1])
with col1 :
    display_aqi_card(reading)
with col2 :
    display_map(reading, location)

display_pollutants(reading)

display_trend_chart(history)
