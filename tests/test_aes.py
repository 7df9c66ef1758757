import pytest

from tlproto.aes import (
    decrypt,
    decrypt_message_with_temp_keys,
    encrypt,
    encrypt_message_with_temp_keys,
    encrypt_raw_with_temp_keys,
    generate_temp_keys,
    message_key,
)
from tlproto.ige import DataNotDivisibleError


def hexed(text: str) -> bytes:
    return bytes.fromhex(text)


def as_int(text: str) -> int:
    return int.from_bytes(hexed(text), "big")


LONG_DATA = hexed(
    "28A92FE20173B347A8BB324B5FAB2667C9A8BBCE6468D5B509A4CBDDC186240A"
    "C912CF7006AF8926DE606A2E74C0493CAA57741E6C82451F54D3E068F5CCC49B"
    "4444124B9666FFB405AAB564A3D01E67F6E912867C8D20D9882707DC330B17B4"
    "E0DD57CB53BFAAFA9EF5BE76AE6C1B9B6C51E2D6502A47C883095C46C81E3BE2"
    "5F62427B585488BB3BF239213BF48EB8FE34C9A026CC8413934043974DB03556"
    "633038392CECB51F94824E140B98637730A4BE79A8F9DAFA39BAE81E1095849E"
    "A4C83467C92A3A17D997817C8A7AC61C3FF414DA37B7D66E949C0AEC858F0482"
    "24210FCC61F11C3A910B431CCBD104CCCC8DC6D29D4A5D133BE639A4C32BBFF1"
    "53E63ACA3AC52F2E4709B8AE01844B142C1EE89D075D64F69A399FEB04E656FE"
    "3675A6F8F412078F3D0B58DA15311C1A9F8E53B3CD6BB5572C294904B726D0BE"
    "337E2E21977DA26DD6E33270251C2CA29DFCC70227F0755F84CFDA9AC4B8DD5F"
    "84F1D1EB36BA45CDDC70444D8C213E4BD8F63B8AB95A2D0B4180DC91283DC063"
    "ACFB92D6A4E407CDE7C8C69689F77A007441D4A6A8384B666502D9B77FC68B5B"
    "43CC607E60A146223E110FCB43BC3C942EF981930CDC4A1D310C0B64D5E55D30"
    "8D863251AB90502C3E46CC599E886A927CDA963B9EB16CE62603B68529EE98F9"
    "F5206419E03FB458EC4BD9454AA8F6BA777573CC54B328895B1DF25EAD9FB4CD"
    "5198EE022B2B81F388D281D5E5BC580107CA01A50665C32B552715F335FD7626"
    "4FAD00DDD5AE45B94832AC79CE7C511D194BC42B70EFA850BB15C2012C5215CA"
    "BFE97CE66B8D8734D0EE759A638AF013"
)

SECOND_NONCE = as_int("311C85DB234AA2640AFC4A76A735CF5B1F0FD68BD17FA181E1229AD867CC024D")
SERVER_NONCE = as_int("A5CF4D33F4A11EA877BA4AA573907330")

DECRYPTED_ANSWER = hexed(
    "BA0D89B53E0549828CCA27E966B301A48FECE2FCA5CF4D33F4A11EA877BA4AA5"
    "7390733002000000FE000100C71CAEB9C6B1C9048E6C522F70F13F73980D4023"
    "8E3E21C14934D037563D930F48198A0AA7C14058229493D22530F4DBFA336F6E"
    "0AC925139543AED44CCE7C3720FD51F69458705AC68CD4FE6B6B13ABDC974651"
    "2969328454F18FAF8C595F642477FE96BB2A941D5BCD1D4AC8CC49880708FA9B"
    "378E3C4F3A9060BEE67CF9A4A4A695811051907E162753B56B0F6B410DBA74D8"
    "A84B2A14B3144E0EF1284754FD17ED950D5965B4B9DD46582DB1178D169C6BC4"
    "65B0D6FF9CA3928FEF5B9AE4E418FC15E83EBEA0F87FA9FF5EED70050DED2849"
    "F47BF959D956850CE929851F0D8115F635B105EE2E4E15D04B2454BF6F4FADF0"
    "34B10403119CD8E3B92FCC5BFE000100262AABA621CC4DF587DC94CF8252258C"
    "0B9337DFB47545A49CDD5C9B8EAE7236C6CADC40B24E88590F1CC2CC762EBF1C"
    "F11DCC0B393CAAD6CEE4EE5848001C73ACBB1D127E4CB93072AA3D1C8151B6FB"
    "6AA6124B7CD782EAF981BDCFCE9D7A00E423BD9D194E8AF78EF6501F415522E4"
    "4522281C79D906DDB79C72E9C63D83FB2A940FF779DFB5F2FD786FB4AD71C9F0"
    "8CF48758E534E9815F634F1E3A80A5E1C2AF210C5AB762755AD4B2126DFA61A7"
    "7FA9DA967D65DFD0AFB5CDF26C4D4E1A88B180F4E0D0B45BA1484F95CB2712B5"
    "0BF3F5968D9D55C99C0FB9FB67BFF56D7D4481B634514FBA3488C4CDA2FC0659"
    "990E8E868B28632875A9AA703BCDCE8FCB7AE551"
)


def test_generate_temp_keys():
    key, iv = generate_temp_keys(SECOND_NONCE, SERVER_NONCE)
    assert key == hexed("F011280887C7BB01DF0FC4E17830E0B91FBB8BE4B2267CB985AE25F33B527253")
    assert iv == hexed("3212D579EE35452ED23E0D0C92841AA7D31B2E9BDEF2151E80D15860311C85DB")


@pytest.mark.parametrize("second,server", [(None, SERVER_NONCE), (SECOND_NONCE, None)])
def test_generate_temp_keys_rejects_missing_nonce(second, server):
    with pytest.raises(ValueError):
        generate_temp_keys(second, server)


def test_decrypt_message_with_temp_keys():
    result = decrypt_message_with_temp_keys(LONG_DATA, SECOND_NONCE, SERVER_NONCE)
    assert result == DECRYPTED_ANSWER


def test_decrypt_message_with_temp_keys_wrong_nonce_fails():
    with pytest.raises(ValueError, match="couldn't trim message"):
        decrypt_message_with_temp_keys(LONG_DATA, SECOND_NONCE + 1, SERVER_NONCE)


@pytest.mark.parametrize(
    "msg,expected",
    [
        (hexed(""), hexed("5E6B4B0D3255BFEF95601890AFD80709")),
        (hexed("00000000000000000000000000000000"), hexed("5103BC5CC44BCDF0A15E160D445066FF")),
        (hexed("5103BC5CC44BCDF0A15E160D445066FF"), hexed("F9D401E298F3EEEC1C927312AEB6B412")),
        (b"some cool message", hexed("4170ED208083FAFD2DFA8507FD4A75B6")),
    ],
    ids=["empty", "zeros", "randomized", "any words"],
)
def test_message_key(msg, expected):
    assert message_key(msg) == expected


def test_encrypt_raw_with_temp_keys():
    msg = hexed(
        "F78AF98EF9D401E298F3EEEC1C927312AEB6B4125103BC5CC44BCDF0A15E160D"
        "445066FF000000000000000000000000"
    )
    nonce = as_int("F011280887C7BB01DF0FC4E17830E0B91FBB8BE4B2267CB985AE25F33B527253")
    expected = hexed(
        "9112F2583EACE884A58D2A5A6047C10F4BE228946C6B66CDE9268C20FC1528CF"
        "CE120A9C53B90D71B6CB8B517172C03E"
    )
    assert encrypt_raw_with_temp_keys(msg, nonce, nonce) == expected


def test_encrypt_message_with_temp_keys_round_trip():
    encrypted = encrypt_message_with_temp_keys(b"hello", SECOND_NONCE, SERVER_NONCE)
    assert len(encrypted) == 32
    assert decrypt_message_with_temp_keys(encrypted, SECOND_NONCE, SERVER_NONCE) == b"hello"


def test_encrypt_with_auth_key():
    assert encrypt(b"hello world!", LONG_DATA) == hexed("BABBC03F65F828E4B97DBC5A992394C2")


def test_encrypt_rejects_short_auth_key():
    with pytest.raises(ValueError, match="wrong len of auth key"):
        encrypt(b"hello world!", bytes(64))


def test_decrypt_keeps_length():
    encrypted = encrypt(b"hello world!", LONG_DATA)
    decrypted = decrypt(encrypted, LONG_DATA, message_key(b"hello world!"))
    assert len(decrypted) == len(encrypted)


def test_decrypt_rejects_partial_block():
    with pytest.raises(DataNotDivisibleError):
        decrypt(bytes(20), LONG_DATA, bytes(16))