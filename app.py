import streamlit as st

from csvstats import Visualizer
from csvstats.logs import configure_logging

configure_logging()

st.set_page_config(
    page_title="CSV Stats Visualizer",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #064075;
        margin-bottom: 0;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-top: 0;
    }
</style>
""", unsafe_allow_html=True)


if "visualizer" not in st.session_state:
    st.session_state["visualizer"] = Visualizer()
visualizer = st.session_state["visualizer"]


@st.cache_data
def read_upload(data, name):
    """Parse once per file content; the Visualizer gets a fresh copy each rerun."""
    fresh = Visualizer()
    fresh.load_bytes(data, name=name)
    return fresh.dataset, fresh.date_column


st.markdown('<p class="main-header">CSV Stats Visualizer</p>', unsafe_allow_html=True)
st.markdown('<p class="sub-header">Averages, medians and histograms for any CSV</p>', unsafe_allow_html=True)
st.markdown(
    """
    Drop a **CSV file** below (or point us at one online). We'll figure out which columns
    hold numbers, and the **Visualizations** page turns any of them into a histogram with
    the average and median marked on it. If the file has a date column, you can narrow
    things down to a date range too.
    """
)

st.divider()

source = st.radio("Where's the data?", ["Upload a file", "Load from URL"], horizontal=True)

if source == "Upload a file":
    uploaded_file = st.file_uploader(
        "Upload a CSV file:",
        type=["csv"],
        help="Values are split on commas; double quotes keep commas inside a field.",
    )
    if uploaded_file is not None:
        try:
            dataset, date_column = read_upload(uploaded_file.getvalue(), uploaded_file.name)
            visualizer.replace(dataset, date_column)
        except Exception as e:
            st.error(f"Couldn't read that file: {e}")
            st.stop()
else:
    url = st.text_input("CSV URL:", placeholder="https://example.com/data.csv")
    if st.button("Load", disabled=not url):
        try:
            with st.spinner("Downloading…"):
                visualizer.load_url(url)
        except Exception as e:
            st.error(f"Couldn't load that URL: {e}")
            st.stop()

if not visualizer.has_data:
    st.info("Upload a CSV to get started.")
    st.stop()


dataset = visualizer.dataset
numeric_cols = visualizer.numeric_columns()

st.success(f"Loaded **{dataset.name or 'CSV'}** — {len(dataset):,} rows × {len(dataset.headers)} columns")

st.subheader("Key Metrics at a Glance")

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric(label="Rows", value=f"{len(dataset):,}")
with col2:
    st.metric(label="Columns", value=f"{len(dataset.headers)}")
with col3:
    st.metric(
        label="Numeric Columns",
        value=f"{len(numeric_cols)}",
        help="At least 80% of the non-empty cells are numbers",
    )
with col4:
    st.metric(
        label="Date Column",
        value=visualizer.date_column or "—",
        help="Enables the date range filter on the Visualizations page",
    )

if not numeric_cols:
    st.warning("No numeric columns found, so there's nothing to chart. Is the file comma separated?")

st.divider()
st.subheader("About This App")

st.markdown(
    """
    Use the **sidebar** to navigate between pages:

    | Page | What's There |
    |------|-------------|
    | **Overview** | Data preview and which columns count as numeric |
    | **Visualizations** | Histogram with average and median lines, plus PNG export |

    **Filters available on the Visualizations page:**
    - Date range selector (when a `Date`/`Datum` column exists)
    - Axis style: fixed integer scale or distinct values only
    - Custom captions under the lowest and highest value
    """
)


st.sidebar.success("Select a page above to explore!")
st.sidebar.markdown("---")
st.sidebar.markdown(f"**File:** {dataset.name or 'CSV'}")
st.sidebar.markdown(f"**Rows:** {len(dataset):,}")
