"""
Report assembly for CIDR results.
"""

from rich.table import Table

from cidrview.core import Result, format_address
from cidrview.render import binary, mask_line

# Widest textual address per family
IPV4_WIDTH = len("255.255.255.255")
IPV6_WIDTH = len("ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff")


def render_report(cidr: str, result: Result) -> str:
    """Render the bit-aligned plain-text report.

    Each value column is padded to the widest address of the family so
    that rulers and binary rows line up underneath each other.
    """
    width = IPV6_WIDTH if result.is_v6 else IPV4_WIDTH
    ip_version = f"IPv{result.version}"
    # host ruler starts under the first host bit
    host_offset = " " * (result.net_mask_size + result.net_mask_size // 8)

    def row(label: str, value: str, detail: str) -> str:
        return f"{label:>14}:  {value:<{width}}  {detail}"

    lines = [""]
    lines.append(f"{'CIDR':>14}:  {cidr}")
    if result.tags:
        lines.append(f"{'Type':>14}:  {', '.join(result.tags)}")
    lines.append("")

    lines.append(row("IP bits", f"{result.ip_bits} ({ip_version})", mask_line(result.ip_bits)))
    lines.append(row("IP address", format_address(result.ip), binary(result.ip)))
    lines.append("")

    lines.append(row(
        "Network bits",
        f"{result.net_mask_size} (..../{result.net_mask_size})",
        mask_line(result.net_mask_size),
    ))
    lines.append(row("Network mask", format_address(result.net_mask), binary(result.net_mask)))
    lines.append("")

    lines.append(row(
        "Host bits",
        f"{result.host_mask_size} ({result.ip_bits} - {result.net_mask_size})",
        host_offset + mask_line(result.host_mask_size),
    ))
    lines.append(row("Host mask", format_address(result.host_mask), binary(result.host_mask)))
    lines.append("")

    lines.append(f"{'Number of IPs':>14}:  {result.ip_count} (2 ^ {result.host_mask_size})")
    lines.append(row("First IP", format_address(result.network), binary(result.network)))
    lines.append(row("Last IP", format_address(result.max), binary(result.max)))
    lines.append("")

    return "\n".join(lines) + "\n"


def build_table(cidr: str, result: Result) -> Table:
    """Build a rich key/value table for a result."""
    table = Table(title=f"CIDR: {cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Version", f"IPv{result.version}")
    if result.tags:
        table.add_row("Type", ", ".join(result.tags))
    table.add_row("IP Address", format_address(result.ip))
    table.add_row("", "")
    table.add_row("Network Bits", f"/{result.net_mask_size}")
    table.add_row("Netmask", format_address(result.net_mask))
    table.add_row("Host Bits", str(result.host_mask_size))
    table.add_row("Hostmask", format_address(result.host_mask))
    table.add_row("", "")
    table.add_row("Total Addresses", f"{result.ip_count:,}")
    table.add_row("First IP", format_address(result.network))
    table.add_row("Last IP", format_address(result.max))

    return table
