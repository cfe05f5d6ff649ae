"""Resource operations, one module per Mux resource."""
