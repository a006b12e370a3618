"""
Hello World - Home Page

Shows the greeting fetched from the Hello World API.

Run the API first (hello-api), then:
    streamlit run streamlit_app.py
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Home Page",
    layout="centered"
)

from views.home_view import HomeView

view = HomeView()
view.render()
