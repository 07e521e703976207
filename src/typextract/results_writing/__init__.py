"""Results writing exports."""

from .type_model_writer import render_type_model, type_model_to_dict, write_type_model

__all__ = ["render_type_model", "type_model_to_dict", "write_type_model"]
