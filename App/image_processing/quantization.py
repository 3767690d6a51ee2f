"""Color quantization methods for reducing image color palettes.

AIDEV-NOTE: Both methods work on Lab points, shape (N, 3), and return the
palette in Lab so the indexer can measure distances without a round trip
through 8-bit RGB. Median cut is the default: it is deterministic by
construction and never invents more colors than the image holds. K-means
is kept for photographs where smoother gradients matter more than speed.
"""

import numpy as np
from sklearn.cluster import KMeans

from models import InvalidInput

QUANTIZATION_METHODS = ("median_cut", "kmeans")


def quantize_lab(
    lab_points: np.ndarray,
    num_colors: int,
    method: str = "median_cut",
) -> np.ndarray:
    """Reduce Lab points to a palette of at most num_colors Lab colors.

    Args:
        lab_points: Lab coordinates, shape (N, 3), N >= 1
        num_colors: Target palette size (>= 1)
        method: 'median_cut' or 'kmeans'

    Returns:
        Palette as a (K, 3) Lab array with K <= num_colors
    """
    if method == "median_cut":
        return median_cut(lab_points, num_colors)
    elif method == "kmeans":
        return quantize_kmeans(lab_points, num_colors)
    raise InvalidInput(
        f"Unknown quantization method {method!r}, "
        f"expected one of {', '.join(QUANTIZATION_METHODS)}"
    )


def _bucket_ranges(bucket: np.ndarray) -> np.ndarray:
    return bucket.max(axis=0) - bucket.min(axis=0)


def median_cut(lab_points: np.ndarray, num_colors: int) -> np.ndarray:
    """Median-cut quantization over an explicit work-list of buckets.

    Each round picks the bucket with the largest summed L/a/b range, sorts
    it along its widest axis and splits it at floor(n / 2). Splitting stops
    once there are num_colors buckets or every bucket holds a single
    distinct color, so fewer than num_colors entries may come back.

    AIDEV-NOTE: Ties go to the first bucket in list order and the first
    axis in L, a, b order (np.argmax semantics), and the sort is stable,
    so identical input always yields an identical palette.
    """
    points = np.asarray(lab_points, dtype=np.float64).reshape(-1, 3)
    if len(points) == 0:
        raise InvalidInput("Cannot quantize an empty set of colors")
    if num_colors < 1:
        raise InvalidInput(f"num_colors must be >= 1, got {num_colors}")

    buckets = [points]
    ranges = [_bucket_ranges(points)]

    while len(buckets) < num_colors:
        spans = np.array([r.sum() for r in ranges])
        # A bucket with zero span holds one distinct color and cannot split
        if not (spans > 0).any():
            break
        index = int(np.argmax(spans))
        bucket = buckets[index]

        axis = int(np.argmax(ranges[index]))
        order = np.argsort(bucket[:, axis], kind="stable")
        bucket = bucket[order]

        median = len(bucket) // 2
        lower, upper = bucket[:median], bucket[median:]

        buckets[index : index + 1] = [lower, upper]
        ranges[index : index + 1] = [_bucket_ranges(lower), _bucket_ranges(upper)]

    return np.array([bucket.mean(axis=0) for bucket in buckets])


def quantize_kmeans(lab_points: np.ndarray, num_colors: int) -> np.ndarray:
    """K-means color quantization in Lab space.

    AIDEV-NOTE: Cluster count is capped at the number of distinct colors,
    otherwise scikit-learn warns and returns duplicate centers.
    """
    points = np.asarray(lab_points, dtype=np.float64).reshape(-1, 3)
    if len(points) == 0:
        raise InvalidInput("Cannot quantize an empty set of colors")
    if num_colors < 1:
        raise InvalidInput(f"num_colors must be >= 1, got {num_colors}")

    distinct = np.unique(points, axis=0)
    n_clusters = min(num_colors, len(distinct))
    if n_clusters == len(distinct):
        return distinct

    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(points)
    return kmeans.cluster_centers_
