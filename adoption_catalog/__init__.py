"""Animal adoption catalog built on Streamlit."""
