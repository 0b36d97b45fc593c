from .num_utils import INT8_MIN, INT8_MAX, fractional_part, is_whole, to_int8

__all__ = ['INT8_MIN', 'INT8_MAX', 'fractional_part', 'is_whole', 'to_int8']
