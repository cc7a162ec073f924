import streamlit as st

st.set_page_config(page_title="Financial Models", layout="wide")

st.title("Financial Models")
st.markdown("""
Select a calculator from the sidebar.

- **GGM**: implied dividend growth rate from the Gordon Growth Model, g = r - D₁ / P
""")
