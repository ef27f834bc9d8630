"""Pytest configuration and fixtures."""

import pytest

from oclc_classify.config import get_settings

INVALID_INPUT_XML = """<?xml version="1.0" encoding="UTF-8" standalone="no"?><classify xmlns="http://classify.oclc.org"><input type="isbn">foo</input><response code="101"/></classify>"""

NO_INPUT_XML = """<?xml version="1.0" encoding="UTF-8" standalone="no"?><classify xmlns="http://classify.oclc.org"><input type="stdnbr"></input><response code="100"/></classify>"""

NOT_FOUND_XML = """<?xml version="1.0" encoding="UTF-8" standalone="no"?><classify xmlns="http://classify.oclc.org"><input type="stdnbr">9780000000002</input><response code="102"/></classify>"""

SINGLE_WORK_XML = """
<classify xmlns="http://classify.oclc.org">
  <response code="0"/>
  <!--Classify is a product of OCLC Online Computer Library Center: http://classify.oclc.org-->
  <work author="foo" editions="28" eholdings="197" format="Book" holdings="2183" itemtype="itemtype-book" owi="47289247" title="FooBar">value</work>
  <orderBy>thold desc</orderBy>
  <input type="isbn">bar</input>
  <recommendations>
    <ddc>
      <mostPopular holdings="2260" nsfa="306.20973" sfa="306.20973"/>
      <mostRecent holdings="2" sfa="304.60973"/>
      <latestEdition holdings="2257" sf2="23" sfa="306.20973"/>
    </ddc>
    <lcc>
      <mostPopular holdings="2342" nsfa="JC599.U5" sfa="JC599.U5"/>
      <mostRecent holdings="2342" sfa="JC599.U5"/>
    </lcc>
  </recommendations>
</classify>
"""

MULTI_WORK_XML = """
<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<classify xmlns="http://classify.oclc.org">
  <response code="4"/>
  <!--Classify is a product of OCLC Online Computer Library Center: http://classify.oclc.org-->
  <workCount>2</workCount>
  <start>0</start>
  <maxRecs>25</maxRecs>
  <orderBy>thold desc</orderBy>
  <input type="isbn">foo</input>
  <works>
    <work author="Dibdin, Michael" editions="66" format="Book" holdings="1278" hyr="2020" itemtype="itemtype-book" lyr="1996" owi="570898" schemes="DDC LCC" title="Così fan tutti : an Aurelio Zen mystery" wi="570898"/>
  </works>
</classify>
"""


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached; reset around each test so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def invalid_input_xml() -> str:
    return INVALID_INPUT_XML


@pytest.fixture
def no_input_xml() -> str:
    return NO_INPUT_XML


@pytest.fixture
def not_found_xml() -> str:
    return NOT_FOUND_XML


@pytest.fixture
def single_work_xml() -> str:
    """Code 0 document: one work plus Dewey and LC recommendations."""
    return SINGLE_WORK_XML


@pytest.fixture
def multi_work_xml() -> str:
    """Code 4 document: a candidate list with one work."""
    return MULTI_WORK_XML
