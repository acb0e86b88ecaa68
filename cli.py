'''
To Run:
python -m theater_statement.cli invoices.json --plays plays.json
'''
import click
import logging
from pathlib import Path
from theater_statement import config, exporter
from theater_statement.errors import StatementError
from theater_statement.renderer import render_text
from theater_statement.statement import summarize

logger = logging.getLogger(__name__)


@click.command()
@click.option('--plays', 'plays_path', type=click.Path(exists=True, path_type=Path),
              default=config.DEFAULT_PLAYS_PATH, help='Path to the play catalog (YAML or JSON)')
@click.option('--csv', 'csv_path', type=click.Path(path_type=Path), default=None,
              help='Also write the statements to this CSV file')
@click.option('-v', '--verbose', is_flag=True, help='Log progress to stderr')
@click.argument('invoices', type=click.Path(exists=True, path_type=Path),
                default=config.DEFAULT_INVOICES_PATH)
def main(plays_path, csv_path, verbose, invoices):
    """
    Print a statement for every invoice in INVOICES.

    Nothing is printed if any performance references an unknown play or a
    genre that cannot be priced.
    """
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        catalog = config.load_catalog(plays_path)
        # summarize everything before printing so a bad invoice leaves no partial output
        summaries = [summarize(invoice, catalog) for invoice in config.load_invoices(invoices)]
    except StatementError as e:
        logger.debug(f"Statement aborted: {e}")
        raise click.ClickException(str(e))

    for summary in summaries:
        click.echo(render_text(summary), nl=False)

    if csv_path is not None:
        exporter.write_statements(csv_path, summaries)
        click.echo(f'✔ {len(summaries)} statement(s) written to {csv_path}', err=True)


if __name__ == '__main__':
    main()
