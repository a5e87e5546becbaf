# client/streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="DPDPA & IT Act", layout="wide")
st.title("⚖️ DPDPA & IT Act Legal Knowledge Dashboard")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **⚖️ Chat** — Ask questions about DPDPA, IT Act 2000 and IT Act 2008. Answers come with citations, cross-framework analysis and compliance steps.
- **🏛️ Updates** — Check the MeitY portal for new regulatory updates and manage the scheduled monitor.
- **📚 Knowledge** — Upload documents to the legal or MeitY knowledge base.
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            r = requests.get(f"{api_url}/healthz", timeout=5)
            st.success(r.json())
        except Exception as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
