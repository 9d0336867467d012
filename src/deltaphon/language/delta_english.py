"""English for Delta-list (X-SAMPA) voicebanks.

Besides the classic Delta list this covers a number of optional North
American sounds (rhotic and nasal vowels, dark l, flaps). Those are never
produced by the dictionaries and are meant to be entered through a
phonetic hint when the voicebank has them.
"""

from deltaphon.language.base import Language
from deltaphon.language.rewrite import RewriteRules
from deltaphon.language.symbols import LanguageSymbols, split_list

VOWELS = split_list(
    "a,A,@,{,V,O,aU,aI,E,3,eI,I,i,oU,OI,U,u,Q,Ol,Ql,aUn,e@,eN,IN,e,o,"
    "Ar,Qr,Er,Ir,Or,Ur,ir,ur,aIr,aUr,A@,Q@,E@,I@,O@,U@,i@,u@,aI@,aU@,"
    "@r,@l,@m,@n,@N,1,e@m,e@n,y,I\\,M,U\\,Y,@\\,@`,3`,A`,Q`,E`,I`,O`,"
    "U`,i`,u`,aI`,aU`,},2,3\\,6,7,8,9,&,{~,I~,aU~,VI,VU,@U,i:,u:,O:,e@0"
)
CONSONANTS = split_list("b,tS,d,D,4,f,g,h,dZ,k,l,m,n,N,p,r,s,S,t,T,v,w,W,j,z,Z,t_},・,_")
AFFRICATES = split_list("tS,dZ")
SHORT_CONSONANTS = split_list("4")
LONG_CONSONANTS = split_list("tS,f,dZ,k,p,s,S,t,T,t_}")
NORMAL_CONSONANTS = split_list("b,d,D,g,h,l,m,n,N,r,v,w,W,j,z,Z,・")

DIPHTHONGS = ("aI", "eI", "OI", "aU", "oU", "VI", "VU", "@U")

# CMUdict (lowercase ARPABET) -> X-SAMPA; identical symbols are left out
CMUDICT_REPLACEMENTS = {
    "aa": "A", "ae": "{", "ah": "V", "ao": "O", "aw": "aU", "ax": "@",
    "ay": "aI", "ch": "tS", "dh": "D", "dx": "4", "eh": "E", "el": "@l",
    "em": "@m", "en": "@n", "eng": "@N", "er": "3", "ey": "eI", "hh": "h",
    "ih": "I", "iy": "i", "jh": "dZ", "ng": "N", "ow": "oU", "oy": "OI",
    "q": "・", "sh": "S", "th": "T", "uh": "U", "uw": "u", "y": "j",
    "zh": "Z",
}

# Order matters: later rules see the output of earlier ones.
REWRITE_RULES = [
    ("A", "Q"),
    ("bV", "bA"),
    ("V b", "A b"),
    ("a I", "V I"),
    ("a U", "V U"),
    ("O", "O:"),
    ("i", "i:"),
    ("u", "u:"),
    ("@r", "@`"),
    ("3", "@r"),
    ("aI", "VI"),
    ("aU", "VU"),
    ("oU", "@U"),
    ("E", "e"),
    ("I", "i"),
    ("o", "O"),
    ("U", "u"),
    ("O u", "O U"),
    ("i O", "I O"),
    ("N", "n"),
    ("r ", "3 "),
    ("V", "A"),
    ("T ", "f "),
    (" T", " s"),
    ("D d", "z d"),
    ("D ", "d "),
    (" D", " z"),
    ("Z d", "S t"),
    (" n-", " m-"),
]

DELTA_ENGLISH = Language(
    tag="EN DELTA",
    name="Delta English Phonemizer",
    symbols=LanguageSymbols(
        vowels=VOWELS,
        consonants=CONSONANTS,
        affricates=AFFRICATES,
        long_consonants=LONG_CONSONANTS,
        short_consonants=SHORT_CONSONANTS,
        normal_consonants=NORMAL_CONSONANTS,
    ),
    replacements=CMUDICT_REPLACEMENTS,
    rules=RewriteRules(REWRITE_RULES),
    diphthongs=DIPHTHONGS,
)
