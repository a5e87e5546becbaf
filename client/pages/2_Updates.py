# client/pages/2_Updates.py
import os
import streamlit as st
import api as API
from components import show_update, show_table
from sample_data import SAMPLE_UPDATES

st.title("🏛️ Regulatory Updates")

SCHEDULE_ID = os.getenv("UPDATES_SCHEDULE_ID", "699be546399dfadeac3879a6")

if "updates" not in st.session_state:
    st.session_state.updates = []
    st.session_state.updates_summary = ""
    st.session_state.updates_last_checked = ""
    st.session_state.reviewed = set()
if "updates_loading" not in st.session_state:
    st.session_state.updates_loading = False

sample = st.sidebar.toggle("Sample data", key="updates_sample")

tab1, tab2 = st.tabs(["Timeline", "Schedule"])

with tab1:
    if st.button("Check for updates", disabled=st.session_state.updates_loading, key="btn_check"):
        st.session_state.updates_loading = True
        try:
            with st.spinner("Checking the MeitY portal..."):
                res = API.check_updates()
            if res.get("ok"):
                st.session_state.updates = res["updates"]
                st.session_state.updates_summary = res["summary"]
                st.session_state.updates_last_checked = res["last_checked"]
                st.session_state.reviewed = set()
            else:
                st.error(res.get("error") or "Failed to check for updates")
        except Exception as e:
            st.error(f"Network error. Please try again. ({e})")
        finally:
            st.session_state.updates_loading = False

    updates = st.session_state.updates or (SAMPLE_UPDATES if sample else [])
    if st.session_state.updates_last_checked:
        st.caption(f"Last checked: {st.session_state.updates_last_checked}")
    if st.session_state.updates_summary:
        st.info(st.session_state.updates_summary)
    if not updates:
        st.write("Monitor MeitY portal for DPDPA and IT Act updates")
    for i, upd in enumerate(updates):
        show_update(upd, reviewed=i in st.session_state.reviewed)
        if i not in st.session_state.reviewed and st.button("Mark reviewed", key=f"rev_{i}"):
            st.session_state.reviewed.add(i)
            st.rerun()

with tab2:
    try:
        listing = API.schedules()
    except Exception as e:
        st.error(e)
        listing = {"schedules": []}
    sched = next((s for s in listing.get("schedules", []) if s["id"] == SCHEDULE_ID), None)
    if sched is None:
        st.warning("Update monitor schedule not found.")
    else:
        state = "Active" if sched["is_active"] else "Paused"
        st.markdown(f"**{sched['cron_human'] or sched['cron_expression']}** ({state})")
        if sched.get("next_run_time"):
            st.caption(f"Next run: {sched['next_run_time']}")
        label = "Pause" if sched["is_active"] else "Resume"
        if st.button(label, key="btn_toggle"):
            try:
                (API.pause if sched["is_active"] else API.resume)(SCHEDULE_ID)
            except Exception as e:
                st.error(e)
            else:
                st.rerun()
        limit = st.number_input("Log entries", 1, 100, 10, key="log_limit")
        if st.button("Fetch execution logs", key="btn_logs"):
            try:
                show_table(API.schedule_logs(SCHEDULE_ID, limit=int(limit))["executions"])
            except Exception as e:
                st.error(e)
