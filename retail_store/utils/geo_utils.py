import math
from typing import Union

Number = Union[int, float]

def calculate_distance(lat1: Number, long1: Number, lat2: Number, long2: Number) -> float:
    """Calculate the euclidean distance between two latitude/longitude pairs.

    Coordinates are treated as points on a plane. This is the same formula
    as the database's ``calculate_distance`` SQL function.

    Args:
        lat1: Latitude of the first point
        long1: Longitude of the first point
        lat2: Latitude of the second point
        long2: Longitude of the second point

    Returns:
        Distance between the two points
    """
    t1 = (float(lat1) - float(lat2)) ** 2
    t2 = (float(long1) - float(long2)) ** 2
    return math.sqrt(t1 + t2)
