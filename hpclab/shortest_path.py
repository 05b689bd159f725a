"""Dijkstra shortest distance from node 0 in an undirected weighted graph."""

import heapq
import math
from collections import defaultdict
from typing import Iterable, Tuple, Union


def shortest_distance(target: int, edges: Iterable[Tuple[int, int, int]]) -> Union[int, float]:
    """Return the shortest distance from node 0 to ``target``, or ``math.inf`` if unreachable."""
    graph = defaultdict(list)
    for u, v, w in edges:
        graph[u].append((v, w))
        graph[v].append((u, w))
    dist = {0: 0}
    heap = [(0, 0)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist.get(u, math.inf):
            continue
        if u == target:
            return d
        for v, w in graph[u]:
            candidate = d + w
            if candidate < dist.get(v, math.inf):
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return math.inf