# -*- coding: utf-8 -*-

DEFAULT_NUM_EXPERIMENTS = 1
DEFAULT_DISPLAY_SIZE = 80
DEFAULT_MAX_BUCKETS = 40
DEFAULT_BOUNDED_BUCKETS = 15
DEFAULT_ENCODING = 'utf-8'

UNDEFINED = 'undefined'

# label, MomentAccumulator attribute name
SUMMARY_FIELDS = (('Count', 'count'),
                  ('Minimum', 'min'),
                  ('Maximum', 'max'),
                  ('Mean', 'mean'),
                  ('Variance', 'variance'),
                  ('Standard deviation', 'std_dev'),
                  ('Skewness', 'skewness'),
                  ('Kurtosis', 'kurtosis'),
                  ('Population variance', 'pop_variance'),
                  ('Population standard deviation', 'pop_std_dev'),
                  ('Population skewness', 'pop_skewness'),
                  ('Population kurtosis', 'pop_kurtosis'))

ECHO_MODES = ('auto', 'always', 'never')
VARIANCE_TYPES = ('population', 'sample')
UNIFORM_TYPES = ('continuous', 'discrete')
