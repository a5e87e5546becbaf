# client/pages/3_Knowledge.py
import streamlit as st
import api as API

st.title("📚 Knowledge Sources")

corpora = {
    "Legal Knowledge Base": ("legal", "Statutes, rules and commentary used by the Legal Knowledge Assistant."),
    "MeitY Knowledge Base": ("meity", "Ministry notifications used by the regulatory update monitor."),
}

for title, (corpus, blurb) in corpora.items():
    st.subheader(title)
    st.caption(blurb)
    f = st.file_uploader("Upload PDF, DOCX or TXT", type=["pdf", "docx", "txt"], key=f"up_{corpus}")
    if f is not None and st.button("Upload", key=f"btn_{corpus}"):
        try:
            res = API.upload(corpus, f.name, f.getvalue(), f.type)
            st.success(f"Uploaded {res['filename']}")
        except Exception as e:
            st.error(e)
