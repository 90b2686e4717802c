from communitysearch.adapters.devrev.adapter import DevRevAdapter

__all__ = ["DevRevAdapter"]
