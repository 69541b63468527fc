"""CSV statistics and histogram helpers behind the Streamlit pages."""

from .visualizer import RenderResult, Visualizer

__all__ = ["RenderResult", "Visualizer"]
