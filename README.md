# ttsnorm

Text front end for a speech synthesis server. It turns raw Chinese or English
text into the symbol-id sequences an acoustic model expects, keeps a small
record of the queries served, and reads the server's configuration.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

- `ttsnorm.numerals`: write integers and floats as Chinese numerals.
  `to_chinese(value, variant, case, method)` counts with units, where
  `method` is one of `ChineseCountMethod.LOW`, `TEN_THOUSAND`, `MIDDLE`,
  `HIGH`; floats are given to two decimals as 角 and 分. It raises
  `NumberToChineseError` (with `kind` `"overflow"` or `"underflow"`) when the
  value is outside the method's range. `to_chinese_naive(value, variant, case)`
  reads digit by digit, with up to two decimals after 點/点.
  `ChineseVariant` chooses traditional or simplified script and `ChineseCase`
  ordinary (`LOWER`) or financial (`UPPER`) digits.
- `ttsnorm.cn_tn`: normalise non-standard words in Chinese text.
  `normalize(text)` spells out dates, money, mobile and fixed-line phone
  numbers, fractions, percentages, numbers with measure words, long digit
  runs and plain numbers, then drops common Chinese and all ASCII punctuation.
  `date_to_chntext`, `money_to_chntext`, `mobilephone_to_chntext`,
  `telephone_to_chntext`, `fraction_to_chntext`, `percentage_to_chntext` and
  `digit_to_chntext` each handle one kind.
- `ttsnorm.ljspeech`: English cleaning (`expand_abbreviations`,
  `number_to_words`, `expand_numbers`, `clean_text`) and
  `LJSpeechProcessor`, whose `text_to_sequence(text)` maps text to symbol
  ids, reading `{...}` sections as ARPAbet and ending with the EOS id.
- `ttsnorm.baker`: `BakerProcessor` turns Chinese text plus its pinyin into
  Baker phonemes. `text_to_phone(text, pinyin_of)` normalises the text and
  returns it with its space-separated phonemes; `text_to_sequence(text,
  pinyin_of)` returns the phoneme ids, raising `KeyError` for a phoneme the
  mapper does not know. `phonemes_from_pinyin(text, pinyin)` does the
  expansion for an already normalised text. `is_zh(word)` tells whether a
  string holds a Chinese character.
- `ttsnorm.record`: `QueryTracker` keeps the last ten queries, the ten
  slowest ones and running totals of queries and words (`count_words`), and
  stores them as JSON (`save`, `load`, `create`). `to_table_string()` renders
  them as text tables.
- `ttsnorm.configuration`: `decode_config(config_file, base_dir=None)` reads
  a YAML list of `Config` entries (plain `{Config: {...}}` mappings or
  `!Config`-tagged ones) and returns the first as an `AppConfig` with `ip`,
  `port` and `log_path`. A missing or `"default"` log path becomes
  `base_dir/logs` (the current directory when `base_dir` is not given); a
  file with no entries raises `ConfigFileLostError`. `init_logging(config)`
  logs DEBUG and above to standard output and INFO and above to a daily
  rotating `tts_server.log` in the log directory, and returns the handlers.

## Examples

```python
from ttsnorm.numerals import ChineseCase, ChineseCountMethod, ChineseVariant, to_chinese
from ttsnorm.cn_tn import normalize

to_chinese(255, ChineseVariant.TRADITIONAL, ChineseCase.UPPER, ChineseCountMethod.TEN_THOUSAND)
# '貳佰伍拾伍'

normalize("加载到95%！")
# '加载到百分之九十五'
```

```python
from datetime import timedelta
from ttsnorm.record import QueryTracker

tracker = QueryTracker.create("2024-01-01 08:00:00", "records/query.json")
tracker.record_query("今天天气很好", "2024-01-01 08:00:01", timedelta(milliseconds=120))
print(tracker.to_table_string())
```

The mapper files read by `BakerProcessor.from_file` and
`LJSpeechProcessor.from_file` are JSON objects holding `symbol_to_id`,
`id_to_symbol`, `speakers_map`, `processor_name` and, for Baker,
`pinyin_dict` (syllable to an initial/final pair). Missing sections are left
empty; an `eos` symbol is always added.

## What it does not do

- It has no HTTP server and no command to run; it is a library.
- It does not synthesise audio or write WAV files; it stops at symbol ids.
- It does not convert Chinese characters to pinyin. `BakerProcessor` takes a
  `pinyin_of` callable that you supply, returning one syllable per Chinese
  character.