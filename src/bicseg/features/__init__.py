from .io import load_feature_matrix

__all__ = ["load_feature_matrix"]
