# engine.py

import random
from dataclasses import dataclass
from typing import Dict, List, Optional

FREE = 0  # page table sentinel for an unowned page


@dataclass(frozen=True)
class SimulatorConfig:
    """
    Fixed memory layout and request range for one simulation run.

    Attributes:
        total_pages (int): Number of pages in physical memory
        page_size (int): Size of each page in MB
        size_unit (int): Process sizes are generated as multiples of this (MB)
        min_units (int): Smallest number of units a process may request
        max_units (int): Largest number of units a process may request
        base_address (int): Reported address of the first page

    Raises:
        ValueError: If a size is not positive, the unit range is empty, or the
            smallest possible process does not fit in a single page.
    """
    total_pages: int = 100
    page_size: int = 160
    size_unit: int = 80
    min_units: int = 1
    max_units: int = 30
    base_address: int = 2000

    def __post_init__(self):
        if self.total_pages < 1:
            raise ValueError("total_pages must be at least 1")
        if self.page_size < 1 or self.size_unit < 1:
            raise ValueError("page_size and size_unit must be positive")
        if self.min_units < 1 or self.min_units > self.max_units:
            raise ValueError("unit range must satisfy 1 <= min_units <= max_units")
        # The allocation loop only terminates if a one-page request can always
        # be drawn. Changing the constants must keep this true.
        if self.min_process_size > self.page_size:
            raise ValueError(
                f"smallest process ({self.min_process_size}MB) must fit in one "
                f"page ({self.page_size}MB)"
            )

    @property
    def total_memory(self) -> int:
        return self.total_pages * self.page_size

    @property
    def min_process_size(self) -> int:
        return self.min_units * self.size_unit

    @property
    def max_process_size(self) -> int:
        return self.max_units * self.size_unit


@dataclass(frozen=True)
class Allocation:
    """One placed process. Created once per placement, never modified."""
    pid: int
    start_address: int
    process_size: int
    pages_allocated: int
    unused: int
    start_page: int

    def __repr__(self):
        return f"[P{self.pid}|{self.start_page}+{self.pages_allocated}|{self.process_size}MB]"


def pages_needed(size, page_size):
    """Number of whole pages required to hold `size` (ceil division)."""
    if size <= 0:
        raise ValueError("process size must be positive")
    return (size + page_size - 1) // page_size


class PagingSimulator:
    """
    Contiguous first-fit allocator over a fixed table of equal-size pages.

    Processes of random size are placed left to right until every page is
    owned. There is no free operation, so memory never develops holes and the
    first fit is always at the cursor.

    Attributes:
        config (SimulatorConfig): Memory layout and request range
        seed (int): Seed of the owned random stream
        page_table (List[int]): Owner pid per page, FREE when unowned
        allocations (List[Allocation]): Records in pid order
        event_log (List[str]): Log of allocation events
        rejected (int): Generated sizes that did not fit the remaining pages
    """

    def __init__(self, seed: int, config: Optional[SimulatorConfig] = None):
        self.config = config or SimulatorConfig()
        self.seed = seed
        self.reset()

    def reset(self):
        """Clear all state and re-seed, so the next run repeats the first."""
        # Int seeds are hashed by absolute value; the string form keeps the
        # sign, so 5 and -5 give different streams
        self.rng = random.Random(str(self.seed))
        self.page_table: List[int] = [FREE] * self.config.total_pages
        self.allocations: List[Allocation] = []
        self.event_log: List[str] = []
        self.rejected = 0

        self.next_free_index = 0
        self.next_address = self.config.base_address
        self.next_pid = 1

    # -----------------------------
    # Request generation
    # -----------------------------
    def generate_process_size(self) -> int:
        units = self.rng.randint(self.config.min_units, self.config.max_units)
        return units * self.config.size_unit

    # -----------------------------
    # Allocation
    # -----------------------------
    @property
    def remaining_pages(self) -> int:
        return self.config.total_pages - self.next_free_index

    @property
    def is_full(self) -> bool:
        return self.next_free_index == self.config.total_pages

    def allocate_next(self) -> Optional[Allocation]:
        """
        Generate one process and place it at the first free page.

        Sizes needing more pages than remain are discarded and redrawn. The
        redraw loop has no attempt limit: SimulatorConfig guarantees the
        smallest size fits in one page, and at least one page is free here.

        Returns:
            Optional[Allocation]: The new record, or None if memory is full
        """
        if self.is_full:
            return None

        remaining = self.remaining_pages
        page_size = self.config.page_size

        while True:
            size = self.generate_process_size()
            need = pages_needed(size, page_size)
            if need <= remaining:
                break
            self.rejected += 1
            self.event_log.append(
                f"Rejected: {size}MB needs {need} pages, {remaining} free"
            )

        pid = self.next_pid
        start = self.next_free_index
        for i in range(start, start + need):
            self.page_table[i] = pid

        record = Allocation(
            pid=pid,
            start_address=self.next_address,
            process_size=size,
            pages_allocated=need,
            unused=need * page_size - size,
            start_page=start,
        )
        self.allocations.append(record)
        self.event_log.append(
            f"Allocated: P{pid} {size}MB -> pages {start}..{start + need - 1} "
            f"@ {self.next_address} (unused {record.unused}MB)"
        )

        self.next_free_index += need
        self.next_address += need * page_size
        self.next_pid += 1

        if self.is_full:
            self.event_log.append(f"Memory full: {len(self.allocations)} processes")
        return record

    def run(self) -> List[Allocation]:
        """Allocate processes until no free page is left."""
        while not self.is_full:
            self.allocate_next()
        return self.allocations

    # -----------------------------
    # Metrics
    # -----------------------------
    def get_stats(self) -> Dict[str, int]:
        pages_used = self.next_free_index
        return {
            "processes": len(self.allocations),
            "pages_used": pages_used,
            "pages_free": self.config.total_pages - pages_used,
            "rejected": self.rejected,
            "total_unused": sum(a.unused for a in self.allocations),
        }

    def get_fragmentation_metrics(self) -> Dict[str, float]:
        allocated = self.next_free_index * self.config.page_size
        requested = sum(a.process_size for a in self.allocations)

        # Internal fragmentation = capacity handed out but not requested
        internal_frag = (allocated - requested) / allocated if allocated else 0.0

        # Memory fills left to right without holes, so free space is always
        # one contiguous run
        external_frag = 0.0

        utilization = requested / self.config.total_memory

        return {
            "external": round(external_frag, 4),
            "internal": round(internal_frag, 4),
            "utilization": round(utilization, 4),
        }
