"""Resources app package.

This app holds the catalog of shared resources (meeting rooms,
equipment, studios) that can be reserved. The catalog is static reference
data: bookings only read it through a ResourceLookup.
"""
