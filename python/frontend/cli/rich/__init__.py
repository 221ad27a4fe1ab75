from frontend.cli.rich.report import print_report, render_board, render_stats

__all__ = ["print_report", "render_board", "render_stats"]
