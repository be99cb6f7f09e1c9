"""
Static (matplotlib) and interactive (plotly) views of a vertex set.
"""

from __future__ import annotations

import os

import numpy as np
import matplotlib.pyplot as plt
import plotly.graph_objects as go
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
from scipy.spatial import ConvexHull


def _ensure_dir(path: str) -> None:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)


def render_png(
    vertices: np.ndarray,
    png_path: str,
    title: str = "",
    marker_size: float = 24.0,
    face_alpha: float = 0.25,
    cmap_name: str = "viridis",
) -> None:
    hull = ConvexHull(vertices)
    dist = np.linalg.norm(vertices, axis=1)
    cmap = plt.get_cmap(cmap_name)
    colors = cmap((dist - dist.min()) / max(1e-9, dist.max() - dist.min()))

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")
    faces = Poly3DCollection(vertices[hull.simplices], alpha=face_alpha, facecolor="lightsteelblue", edgecolor="grey")
    ax.add_collection3d(faces)
    ax.scatter(vertices[:, 0], vertices[:, 1], vertices[:, 2], c=colors, s=marker_size, depthshade=False)

    extent = float(np.abs(vertices).max()) or 1.0
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_zlim(-extent, extent)
    ax.set_box_aspect((1, 1, 1))
    if title:
        ax.set_title(title)
    fig.tight_layout()

    _ensure_dir(png_path)
    fig.savefig(png_path, dpi=160)
    plt.close(fig)


def render_html(vertices: np.ndarray, html_path: str, title: str = "", marker_size: float = 5.0) -> None:
    hull = ConvexHull(vertices)
    tri = hull.simplices
    mesh = go.Mesh3d(
        x=vertices[:, 0],
        y=vertices[:, 1],
        z=vertices[:, 2],
        i=tri[:, 0],
        j=tri[:, 1],
        k=tri[:, 2],
        color="lightsteelblue",
        opacity=0.4,
    )
    scatter = go.Scatter3d(
        x=vertices[:, 0],
        y=vertices[:, 1],
        z=vertices[:, 2],
        mode="markers",
        marker=dict(size=marker_size, color=np.linalg.norm(vertices, axis=1), colorscale="Viridis"),
    )
    fig = go.Figure(data=[mesh, scatter])
    fig.update_layout(
        title=title,
        scene=dict(aspectmode="data"),
        margin=dict(l=0, r=0, t=30, b=0),
    )
    _ensure_dir(html_path)
    fig.write_html(html_path, include_plotlyjs="cdn")
