from .flight import compute_flight_metrics

__all__ = ["compute_flight_metrics"]
