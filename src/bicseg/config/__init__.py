from .params import BicParams, load_bic_config, params_from_mapping

__all__ = ["BicParams", "load_bic_config", "params_from_mapping"]
