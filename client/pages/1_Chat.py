# client/pages/1_Chat.py
import streamlit as st
import api as API
from components import show_answer
from sample_data import SAMPLE_MESSAGES, SAMPLE_QUESTIONS

st.title("⚖️ Legal Knowledge Assistant")
st.caption("Ask about DPDPA, IT Act 2000, or IT Act 2008 provisions")

# ------------------------
# Session state
# ------------------------
if "messages" not in st.session_state:
    st.session_state.messages = []
if "session_id" not in st.session_state:
    st.session_state.session_id = None
if "chat_loading" not in st.session_state:
    st.session_state.chat_loading = False

sample = st.sidebar.toggle("Sample data", key="chat_sample")
framework = st.radio("Framework", ["All", "DPDPA", "IT Act 2000", "IT Act 2008"], horizontal=True)

messages = st.session_state.messages or (SAMPLE_MESSAGES if sample else [])

# ------------------------
# Conversation
# ------------------------
for msg in messages:
    with st.chat_message(msg["role"]):
        if msg["role"] == "user":
            st.markdown(msg["content"])
        elif msg.get("error"):
            st.error(msg["error"])
        else:
            show_answer(msg["answer"], msg.get("frameworks") or [])

if not messages:
    st.markdown("**Try one of these:**")
    cols = st.columns(len(SAMPLE_QUESTIONS))
    for col, q in zip(cols, SAMPLE_QUESTIONS):
        if col.button(q, key=f"sample_{q}"):
            st.session_state.pending = q
            st.rerun()

typed = st.chat_input("Ask about DPDPA, IT Act 2000, or IT Act 2008...",
                      disabled=st.session_state.chat_loading)
question = typed or st.session_state.pop("pending", None)

# One question in flight at a time; the backend enforces it too (HTTP 409).
if question and not st.session_state.chat_loading:
    st.session_state.chat_loading = True
    st.session_state.messages.append({"role": "user", "content": question})
    try:
        with st.spinner("Consulting the legal knowledge base..."):
            res = API.chat(question, framework=framework, session_id=st.session_state.session_id)
        st.session_state.session_id = res.get("session_id")
        if res.get("ok"):
            st.session_state.messages.append(
                {"role": "assistant", "answer": res["answer"], "frameworks": res["frameworks"]})
        else:
            st.session_state.messages.append({"role": "assistant", "error": res.get("error")})
    except Exception as e:
        st.session_state.messages.append({"role": "assistant", "error": f"Network error. Please try again. ({e})"})
    finally:
        st.session_state.chat_loading = False
    st.rerun()
