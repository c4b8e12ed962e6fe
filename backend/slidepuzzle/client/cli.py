import logging
import time

import click

from slidepuzzle.client.api import DEFAULT_API_URL, ApiClient
from slidepuzzle.game.controller import GameController, LevelOutcome, LoginFailed, Screen


def _render_board(controller: GameController) -> None:
    s = controller.state
    level = controller.level
    board = s.board
    width = len(str(len(board)))
    click.echo(f"\nLevel {level.id} - {board.size}x{board.size}   time: {s.time_left}s   moves: {board.moves}   score: {s.total_score}")
    for r, row in enumerate(board.rows()):
        cells = []
        for c, value in enumerate(row):
            pos = r * board.size + c
            mark = "*" if pos == board.selected_index else " "
            cells.append(f"{pos + 1:>{width}}:{value:>{width}}{mark}")
        click.echo("  ".join(cells))


def _render_leaderboard(controller: GameController) -> None:
    s = controller.state
    click.echo("\nLeaderboard")
    if s.leaderboard_error:
        click.echo(s.leaderboard_error)
        return
    for i, entry in enumerate(s.leaderboard, start=1):
        click.echo(f"{i}. {entry.get('name')} - {entry.get('score')}")


def _read_positions(raw: str, tiles: int):
    parts = raw.replace(",", " ").split()
    try:
        positions = [int(p) - 1 for p in parts]
    except ValueError:
        return None
    if not positions or len(positions) > 2 or any(not 0 <= p < tiles for p in positions):
        return None
    return positions


@click.command()
@click.option('--username', prompt='Your name', help='Name shown on the leaderboard.')
@click.option('--api-url', envvar='SLIDEPUZZLE_API_URL', default=DEFAULT_API_URL, show_default=True)
@click.option('--static-root', type=click.Path(file_okay=False), default=None, help='Folder holding the level images.')
@click.option('-v', '--verbose', is_flag=True)
def main(username, api_url, static_root, verbose):
    """Play the sliding-tile puzzle in a terminal against a running server."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    controller = GameController(ApiClient(api_url), static_root=static_root)
    try:
        controller.start_game(username)
    except (ValueError, LoginFailed) as exc:
        raise click.ClickException(str(exc))

    click.echo('Select two positions to swap them, e.g. "1 5". Enter q to quit.')
    while controller.state.screen is Screen.PUZZLE:
        _render_board(controller)
        raw = click.prompt('swap', default='', show_default=False).strip().lower()
        if controller.state.screen is not Screen.PUZZLE:
            break
        if raw == 'q':
            controller.reset()
            return
        positions = _read_positions(raw, len(controller.state.board))
        if positions is None:
            click.echo('Enter one or two positions from the board.')
            continue
        level_index = controller.state.level_index
        for pos in positions:
            if controller.state.screen is not Screen.PUZZLE or controller.state.level_index != level_index:
                break
            controller.click(pos)

    s = controller.state
    if s.last_outcome is LevelOutcome.FAILED:
        click.echo("\nTime's up!")
    click.echo(f"\nFinal score: {s.total_score}  {s.comment}")
    if s.submit_error:
        click.echo(f"Score was not saved: {s.submit_error}")
    time.sleep(controller.leaderboard_delay)
    if controller.state.screen is not Screen.LEADERBOARD:
        controller.show_leaderboard()
    _render_leaderboard(controller)


if __name__ == '__main__':
    main()
