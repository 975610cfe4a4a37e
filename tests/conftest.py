import pytest

STUDY_TEXT = (
    "Introduction: Net present value measures investment worth.\n"
    "The NPV of a project is important. It equals the sum of discounted cash flows.\n\n"
    "Investors compare projects using discounted cash flows. "
    "Chapter 2 explains the discount rate in detail. "
    "A higher discount rate lowers the present value of future cash flows. "
    "For example, a bond pays fixed cash flows every year. "
    "Remember that cash flows must be discounted at the right rate. "
    "Projects with positive value create wealth for investors. "
    "In summary, discounted cash flows drive every valuation decision."
)

FILLER = "Filler text describes ordinary routine material for the course."


@pytest.fixture
def study_text():
    return STUDY_TEXT


@pytest.fixture
def filler_document():
    def build(count, special=None, at=None):
        sentences = [FILLER] * count
        if special is not None:
            sentences[at] = special
        return " ".join(sentences)

    return build
