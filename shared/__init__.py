"""
Shared Kernel

Building blocks shared by the room and reservation apps: value objects,
the reservation error taxonomy and the transaction boundary that translates
database failures into that taxonomy.
"""
