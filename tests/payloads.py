"""Sample API records, one per item type."""

STORY = {
    "by": "dhouston",
    "descendants": 71,
    "id": 8863,
    "kids": [8952, 9224, 8917],
    "score": 111,
    "time": 1175714200,
    "title": "My YC app: Dropbox - Throw away your USB drive",
    "type": "story",
    "url": "http://www.getdropbox.com/u/2/screencast.html",
}

JOB = {
    "by": "justin",
    "id": 192327,
    "score": 6,
    "text": "Justin.tv is the biggest live video site online.",
    "time": 1210981217,
    "title": "Justin.tv is looking for a Lead Flash Engineer!",
    "type": "job",
    "url": "",
}

ASK = {
    "by": "tel",
    "descendants": 16,
    "id": 121003,
    "kids": [121016, 121109],
    "score": 25,
    "text": "<i>or</i> HN: the Next Iteration",
    "time": 1203647620,
    "title": "Ask HN: The Arc Effect",
    "type": "ask",
}

COMMENT = {
    "by": "norvig",
    "id": 2921983,
    "kids": [2922097, 2922429],
    "parent": 2921506,
    "text": "Aw shucks, guys ... you make me blush with your compliments.",
    "time": 1314211127,
    "type": "comment",
}

POLL = {
    "by": "pg",
    "descendants": 54,
    "id": 126809,
    "kids": [126822, 126823],
    "parts": [126810, 126811, 126812],
    "score": 46,
    "text": "",
    "time": 1204403652,
    "title": "Poll: What would happen if News.YC had explicit support for polls?",
    "type": "poll",
}

POLLOPT = {
    "by": "pg",
    "id": 160705,
    "poll": 160704,
    "score": 335,
    "text": "Yes, ban them; I'm tired of seeing Valleywag stories on News.YC.",
    "time": 1207886576,
    "type": "pollopt",
}

USER = {
    "about": "This is a test",
    "created": 1173923446,
    "delay": 0,
    "id": "jl",
    "karma": 2937,
    "submitted": [8265435, 8168423, 8090946],
}

PAYLOADS = {
    "story": STORY,
    "job": JOB,
    "ask": ASK,
    "comment": COMMENT,
    "poll": POLL,
    "pollopt": POLLOPT,
}
