"""Rooms app package.

Rooms are the bookable resources: a building, a room number and a seat
count. They are maintained through the Django admin and listed per
building through the API. The reservation app references them by id.
"""
