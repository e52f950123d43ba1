from typing import List, Optional, Tuple

from pickles_core import gherkin


def table_row(*values: str) -> gherkin.TableRow:
    return gherkin.TableRow(tuple(gherkin.TableCell(value) for value in values))


def data_table(*rows: Tuple[str, ...]) -> gherkin.DataTable:
    return gherkin.DataTable(tuple(table_row(*row) for row in rows))


def tags(*names: str) -> Tuple[gherkin.Tag, ...]:
    return tuple(gherkin.Tag(name) for name in names)


def create_specrun_report(features: List[Tuple[str, List[Tuple[str, Optional[str]]]]], *, escape: bool = True) -> str:
    """Create a SpecRun HTML report with the results embedded the same way SpecRun does it."""
    buffer: List[str] = ['<features>']

    for feature_title, scenarios in features:
        buffer.append(f'<feature><title>{feature_title}</title><scenarios>')
        for scenario_title, result in scenarios:
            if result is None:
                buffer.append(f'<scenario><title>{scenario_title}</title></scenario>')
            else:
                buffer.append(f'<scenario><title>{scenario_title}</title><result>{result}</result></scenario>')
        buffer.append('</scenarios></feature>')

    buffer.append('</features>')

    payload = '\n'.join(buffer)

    if escape:
        payload = payload.replace('<', '&lt;').replace('>', '&gt;')

    return '\n'.join(
        [
            '<html>',
            '<head><title>SpecRun execution report</title></head>',
            '<body>',
            '<h1>Test results</h1>',
            f'<!-- Pickles Begin\n{payload}\nPickles End -->',
            '</body>',
            '</html>',
        ]
    )


FEATURE_EATING = '''@fruit
Feature: Eating
    In order to stay alive
    As a hungry person
    I want to eat cucumbers

    Background:
        Given there is a basket

    @smoke
    Scenario: Add two numbers
        Given I have entered 50 into the calculator
        And I have entered 70 into the calculator

    Scenario: Read a recipe
        Given the recipe
            """
            two cucumbers
            """
        When the ingredients are
            | name     | amount |
            | cucumber | 2      |
            | salt     | 1      |
        Then I am done

    Scenario Outline: Eating
        Given there are <start> cucumbers
        When I eat <eat> cucumbers
        Then I should have <left> cucumbers

        Examples: Amounts
            | start | eat | left |
            | 5     | 3   | 2    |
            | 2     | 6   | -4   |
'''
