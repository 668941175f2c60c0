"""Application-layer helpers shared by the domain apps."""
