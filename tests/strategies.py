"""Hypothesis strategies for property-based testing of assertkit."""

from hypothesis import strategies as st

from assertkit import TextReason, with_reason

texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
    KeyError('missing'),
])

# Values that are neither text nor exceptions
opaque_values = st.one_of(
    st.integers(),
    st.floats(allow_nan=False),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
    st.none(),
    st.builds(object),
)

# Values that are never None
present_values = st.one_of(
    st.integers(),
    st.text(max_size=20),
    st.booleans(),
    st.lists(st.none(), max_size=3),
    st.builds(object),
)

# A single reason and the message it resolves to
reason_with_message = st.one_of(
    texts.map(lambda t: (t, t)),
    texts.map(lambda t: (TextReason(t), t)),
    texts.map(lambda t: (with_reason(ValueError(t)), t)),
)

reason_lists = st.lists(reason_with_message, min_size=1, max_size=6)
