# report.py

from typing import List

from engine import PagingSimulator

PAGES_PER_LINE = 20


def format_allocations(sim: PagingSimulator) -> List[str]:
    """Header, column titles and one right-aligned row per allocation."""
    lines = [
        "Summary Report Format Example:",
        "",
        "Process Id MG".ljust(16)
        + "Starting Memory Address".ljust(26)
        + "Size of the Process MB".ljust(25)
        + "Unused Space MG",
    ]
    for a in sim.allocations:
        lines.append(
            f"{a.pid:>7}        {a.start_address:>7}                 "
            f"{a.process_size:>7}                 {a.unused:>5}"
        )
    return lines


def format_constants(sim: PagingSimulator) -> List[str]:
    cfg = sim.config
    return [
        "Method:  first-fit contiguous allocation",
        "",
        "Memory constants:",
        f" - Total memory: {cfg.total_memory} MB "
        f"({cfg.total_pages} pages x {cfg.page_size} MB)",
        f" - Page size: {cfg.page_size} MB",
        f" - Process size unit: {cfg.size_unit} MB "
        f"(random {cfg.min_units}..{cfg.max_units} units)",
        f" - Starting address: {cfg.base_address}",
    ]


def format_page_table(page_table: List[int], per_line: int = PAGES_PER_LINE) -> List[str]:
    """Dump `index:owner` pairs, pipe separated, `per_line` pairs per line."""
    pairs = [f"{i}:{owner}" for i, owner in enumerate(page_table)]
    return [
        " | ".join(pairs[i:i + per_line])
        for i in range(0, len(pairs), per_line)
    ]


def build_report(sim: PagingSimulator) -> str:
    lines = format_allocations(sim)
    lines.append("")
    lines.extend(format_constants(sim))
    lines.append("")
    lines.append("Memory Page Table (index:pid):")
    lines.extend(format_page_table(sim.page_table))
    return "\n".join(lines) + "\n"
