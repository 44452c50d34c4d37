"""
Shared fixtures: small CSV exports written to a temp data folder.
"""
import textwrap

import pytest

from dashboard.config.test_protocols import (
    CMJ_PROTOCOL, HAMSTRING_PROTOCOL, HIP_PROTOCOL, HOP_PROTOCOL
)


def write_csv(directory, file_name: str, content: str):
    path = directory / file_name
    path.write_text(textwrap.dedent(content).lstrip(), encoding='utf-8')
    return path


@pytest.fixture
def write_export():
    return write_csv


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / 'data'
    directory.mkdir()
    return directory


@pytest.fixture
def hop_csv(data_dir):
    """Three RSI scores, one athlete missing the test"""
    return write_csv(data_dir, HOP_PROTOCOL.file_name, """
        Name,RSI
        Aoife,1.8
        Niamh,
        Orla,2.6
        Ciara,1.2
    """)


@pytest.fixture
def cmj_csv(data_dir):
    """Heights 20, 30, 40 cm plus one athlete without a CMJ height"""
    return write_csv(data_dir, CMJ_PROTOCOL.file_name, """
        Name,CMJ Jump Height (cm),CMJ Peak Power (W/kg),SLCMJ Jump Height (L) (cm),SLCMJ Jump Height (R) (cm),SLCMJ Asymmetry (%)
        Aoife,20,31.5,10,15,12% L
        Niamh,30,42.0,20,5,8% R

        Orla,40,38.2,14,14,
        Ciara,,35.0,12,11,4% R
    """)


@pytest.fixture
def hip_csv(data_dir):
    return write_csv(data_dir, HIP_PROTOCOL.file_name, """
        Name,Hip Abduction L,Hip Abduction R,Hip Adduction L,Hip Adduction R,Hip Max Imbalance (%),Max Ratio L,Max Ratio R
        Aoife,150,160,200,220,9.1% R,1.33,1.38
        Niamh,210,180,260,230,11.5% L,1.24,1.28
        Orla,130,140,170,160,5.9% L,1.31,1.14
    """)


@pytest.fixture
def hamstring_csv(data_dir):
    return write_csv(data_dir, HAMSTRING_PROTOCOL.file_name, """
        Name,Nordic Max Force L,Nordic Max Force R,Nordic Max Imbalance (%),ISO Prone Max Force L,ISO Prone Max Force R,ISO Prone Max Imbalance (%)
        Aoife,300,250,16.7% L,200,210,4.8% R
        Niamh,220,260,15.4% R,260,240,7.7% L
        Orla,,240,,190,180,5.3% L
    """)
