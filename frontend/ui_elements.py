#file: frontend/ui_elements.py

import streamlit as st
import pandas as pd
import plotly.express as px

from frontend.categories import classify
from frontend.utils import format_time, readings_to_frame

AQI_SCALE_MAX = 500

POLLUTANTS = {
    "particulate2_5" : {"name" : "PM2.5", "unit" : "μg/m³", "description" : "Minuscule particles that can enter your lungs 🫁"},
    "particulate10" : {"name" : "PM10", "unit" : "μg/m³", "description" : "Dust and smoke particles in the atmosphere 💨"},
    "nitrogen_dioxide" : {"name" : "NO₂", "unit" : "ppb", "description" : "Gas from motor vehicles and factories 🚗"},
    "ozone" : {"name" : "O₃", "unit" : "ppb", "description" : "Ground-level ozone formed in sunlight ☀️"},
    "carbon_monoxide" : {"name" : "CO", "unit" : "ppm", "description" : "Odourless gas from incomplete combustion 🔥"},
}


def display_aqi_card(reading) :
    """Display the current index with its category."""
    category = classify(reading.index)

    with st.container(border = True) :
        col1, col2 = st.columns([3, 1])
        col1.subheader("Air Quality Index")
        col2.caption(f"Updated: {format_time(reading.observed_at)}")

        col1, col2 = st.columns([1, 3])
        col1.markdown(
            f"<div style='font-size:3rem;font-weight:700;color:{category.severity_color}'>{reading.index:.0f}</div>",
            unsafe_allow_html = True
        )
        col2.markdown(f"### {category.label.display_name}")
        col2.write(category.description)

        st.progress(min(reading.index, AQI_SCALE_MAX) / AQI_SCALE_MAX)
        st.caption(f"Scale: 0 - {AQI_SCALE_MAX}")
        st.info(category.recommendation)


def display_pollutants(reading) :
    """Display one card per pollutant."""
    columns = st.columns(len(POLLUTANTS))
    for column, (field, pollutant) in zip(columns, POLLUTANTS.items()) :
        with column.container(border = True) :
            st.metric(pollutant["name"], f"{getattr(reading, field):g} {pollutant['unit']}")
            st.caption(pollutant["description"])


def map_figure(reading, location) :
    """Build a map with a single marker coloured by the reading's category."""
    category = classify(reading.index)
    station_df = pd.DataFrame([{
        "lat" : location.latitude,
        "lon" : location.longitude,
        "name" : location.name or f"{location.latitude:.4f}, {location.longitude:.4f}",
        "aqi" : reading.index,
        "size" : 20,
    }])

    fig_map = px.scatter_mapbox(
        station_df,
        lat = "lat",
        lon = "lon",
        hover_name = "name",
        hover_data = {"aqi" : True, "lat" : False, "lon" : False, "size" : False},
        size = "size",
        color_discrete_sequence = [category.severity_color],
        zoom = 10,
        height = 400,
        title = "Air Quality Index"
    )
    fig_map.update_layout(
        mapbox_style = "open-street-map",
        margin = {
            "r" : 0,
            "t" : 30,
            "l" : 0,
            "b" : 0
        }
    )
    return fig_map


def display_map(reading, location) :
    """Display the location on a map."""
    st.plotly_chart(map_figure(reading, location), use_container_width = True)


def trend_figure(history) :
    """Build a line chart of the index over the given readings."""
    data_frame = readings_to_frame(history)

    fig = px.line(
        data_frame,
        x = "observed_at",
        y = "index",
        title = "Air Quality Timeline 📊",
        labels = {
            "observed_at" : "Time",
            "index" : "AQI"
        }
    )
    fig.update_traces(line_color = "#22c55e")
    fig.update_xaxes(tickformat = "%H:%M")
    return fig


def display_trend_chart(history) :
    """Display the synthetic 24-hour trend."""
    if not history :
        st.info("No data available.")
        return
    st.plotly_chart(trend_figure(history), use_container_width = True)
    st.caption("Estimated from the current reading with random variation; not measured history.")
