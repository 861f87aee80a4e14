"""Supporting utilities: configuration, logging, clock sources and conversions."""
