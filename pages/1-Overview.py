import pandas as pd
import streamlit as st

from csvstats import settings
from csvstats.columns import profile_columns
from csvstats.dates import date_bounds, parse_date
from csvstats.logs import configure_logging

configure_logging()

st.set_page_config(page_title="Data Overview", layout="wide")

st.title("Data Overview")
st.markdown("Shows you the basics of the file you loaded, so you know what you're working with before looking at the charts.")


visualizer = st.session_state.get("visualizer")
if visualizer is None or not visualizer.has_data:
    st.info("No data yet. Load a CSV on the main page first.")
    st.stop()

dataset = visualizer.dataset
df = dataset.to_frame()
profiles = profile_columns(dataset)


st.subheader("Dataset at a Glance")

col1, col2, col3, col4 = st.columns(4)
col1.metric("Rows", f"{len(dataset):,}")
col2.metric("Columns", f"{len(dataset.headers)}")
col3.metric("Numeric", f"{sum(p.is_numeric for p in profiles)}")
col4.metric("Empty Cells", f"{int(df.isin(list(settings.EMPTY_MARKERS)).sum().sum()):,}")


st.divider()
tab1, tab2, tab3 = st.tabs(["Column Info", "Data Sample", "Dates"])

with tab1:
    st.subheader("Which Columns Count as Numbers?")
    st.caption(
        f"A column is numeric when at least {settings.NUMERIC_THRESHOLD:.0%} of its "
        f"non-empty cells are numbers. Empty cells and '-' don't count either way."
    )

    info_df = pd.DataFrame(
        [
            {
                "Column": p.name,
                "Non-Empty": f"{p.non_empty:,}",
                "Numeric Cells": f"{p.numeric:,}",
                "Numeric %": f"{p.ratio * 100:.1f}%",
                "Numeric?": "Yes" if p.is_numeric else "No",
            }
            for p in profiles
        ]
    )
    st.dataframe(info_df, use_container_width=True, hide_index=True)

    csv = info_df.to_csv(index=False)
    st.download_button(
        label="Download as CSV",
        data=csv,
        file_name="column_info.csv",
        mime="text/csv",
    )

with tab2:
    st.subheader("Peek at the Data")

    num_rows = st.slider(
        "How many rows?", min_value=5, max_value=100, value=20, step=5
    )
    display_cols = st.multiselect(
        "Which columns to show:",
        dataset.headers,
        default=dataset.headers[:8],
    )

    if display_cols:
        st.dataframe(
            df[display_cols].head(num_rows),
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.warning("You gotta pick at least one column!")

with tab3:
    st.subheader("Date Coverage")

    if visualizer.date_column is None:
        st.info(
            "No date column found. Name a column one of "
            + ", ".join(f"`{name}`" for name in settings.DATE_COLUMN_NAMES)
            + " to get the date filter."
        )
    else:
        column = visualizer.date_column
        parsed = sum(parse_date(value) is not None for value in dataset.column(column))
        bounds = date_bounds(dataset.rows, column)

        c1, c2, c3 = st.columns(3)
        with c1:
            st.info(f"**Date Column:** {column}")
        with c2:
            if bounds:
                st.info(f"**Date Range:** {bounds[0]:%d.%m.%Y} to {bounds[1]:%d.%m.%Y}")
            else:
                st.info("**Date Range:** none readable")
        with c3:
            st.info(f"**Readable Dates:** {parsed:,} of {len(dataset):,}")

        if parsed < len(dataset):
            st.warning(
                "Some rows have no readable DD.MM.YYYY date. They're left out whenever the date filter is on."
            )
