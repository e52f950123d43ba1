DEFAULT_LANGUAGE = 'en'

ENV_FEATURE_LANGUAGE = 'PICKLES_FEATURE_LANGUAGE'

MARKER_LANGUAGE = '# language:'

MARKER_RESULTS_BEGIN = '<!-- Pickles Begin'
MARKER_RESULTS_END = 'Pickles End -->'

SCENARIO_OUTLINE_TITLE_SEPARATOR = ', '
