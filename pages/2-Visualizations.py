import streamlit as st

from csvstats import i18n, settings
from csvstats.chart import export_filename
from csvstats.logs import configure_logging
from csvstats.stats import format_stat

configure_logging()

st.set_page_config(page_title="Visualizations", layout="wide")

st.title("Visualizations")
st.markdown("Pick a numeric column in the sidebar and see how its values are spread. The dashed lines mark the median and the average, and everything updates when you change a filter.")


visualizer = st.session_state.get("visualizer")
if visualizer is None or not visualizer.has_data:
    st.info("No data yet. Load a CSV on the main page first.")
    st.stop()

locale = settings.LOCALE


st.sidebar.header("Filters")

date_from = date_to = None
if visualizer.date_column:
    # Date range selector - starts out covering every row
    st.sidebar.subheader("Date Range")
    min_date, max_date = visualizer.default_date_range()

    date_range = st.sidebar.date_input(
        "Pick your dates:",
        value=(min_date, max_date),
        format="DD.MM.YYYY",
    )

    # Only one end picked so far
    if isinstance(date_range, tuple) and len(date_range) == 2:
        date_from, date_to = date_range
    elif isinstance(date_range, tuple):
        date_from = date_to = None
    else:
        date_from = date_to = date_range

numeric_cols = visualizer.numeric_columns(date_from, date_to)

st.sidebar.subheader("Column")
column = st.sidebar.selectbox(
    "Numeric column:",
    options=numeric_cols,
    index=None,
    placeholder=i18n.text("choose_column", locale),
)

st.sidebar.subheader("Axis")
mode = st.sidebar.radio(
    "Axis style:",
    options=list(settings.AXIS_MODES),
    index=list(settings.AXIS_MODES).index(settings.AXIS_MODE),
    format_func=lambda m: "Fixed integer scale" if m == "integer" else "Distinct values only",
)
min_label = st.sidebar.text_input("Caption under the lowest value:", placeholder="e.g. not at all")
max_label = st.sidebar.text_input("Caption under the highest value:", placeholder="e.g. very much")


if visualizer.date_column:
    summary = visualizer.filter(date_from, date_to)
    st.sidebar.divider()
    st.sidebar.metric("Rows in Range", f"{summary.filtered:,}")
    st.sidebar.caption(summary.summary(locale))

if not numeric_cols:
    st.warning("No numeric columns in the selected rows. Try widening the date range?")
    st.stop()

if column is None:
    visualizer.clear_chart()
    st.info("Choose a column in the sidebar to draw its histogram.")
    st.stop()


try:
    result = visualizer.render(
        column,
        date_from=date_from,
        date_to=date_to,
        mode=mode,
        min_label=min_label,
        max_label=max_label,
        locale=locale,
    )
except Exception as e:
    st.error(f"Couldn't render chart: {e}")
    st.stop()

st.subheader(column)

col1, col2, col3 = st.columns(3)
col1.metric(i18n.text("average", locale), format_stat(result.stats.average))
col2.metric(i18n.text("median", locale), format_stat(result.stats.median))
col3.metric("Values", f"{result.spec.value_count:,}")

if result.spec.value_count == 0:
    st.warning("No numbers in this column for the selected rows, so the average and median show as 0.")

hidden = [line.key for line in result.spec.lines if not line.visible]
if hidden:
    st.caption(f"Off the axis, not drawn: {', '.join(i18n.text(key, locale) for key in hidden)}")

st.plotly_chart(result.figure, use_container_width=True)


st.divider()
st.subheader("Download")

if st.button("Prepare PNG"):
    try:
        with st.spinner("Drawing the chart…"):
            png = result.to_png()
        st.download_button(
            label="Download chart as PNG",
            data=png,
            file_name=export_filename(column),
            mime="image/png",
        )
    except Exception as e:
        st.error(f"Couldn't export chart: {e}")
