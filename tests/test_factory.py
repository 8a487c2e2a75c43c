import logging

from itemid_browse import create_item_id_parser
from itemid_browse.domain.models import ClientConfiguration, DaClientConfiguration
from itemid_browse.processing.parser import PrefixPatchedParser, SeparatorParser


def test_da_configuration_selects_patched_parser():
    parser = create_item_id_parser(DaClientConfiguration(".", group_prefix="G."))

    assert isinstance(parser, PrefixPatchedParser)


def test_base_configuration_selects_separator_parser():
    assert isinstance(create_item_id_parser(ClientConfiguration(".")), SeparatorParser)


def test_no_configuration_selects_separator_parser():
    assert isinstance(create_item_id_parser(), SeparatorParser)


def test_logger_is_passed_through():
    logger = logging.getLogger("itemid_browse.tests.factory")

    assert create_item_id_parser(logger=logger).logger is logger


def test_selected_parser_accepts_its_configuration():
    configuration = DaClientConfiguration("", group_prefix="G.", item_separator=".")

    parser = create_item_id_parser(configuration)

    assert parser.parse(configuration, "G.sub.leaf").browse_name == "leaf"
