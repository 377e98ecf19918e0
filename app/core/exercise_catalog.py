"""Built-in exercise catalog: MET values from the Compendium of Physical Activities, plus input types.

Seeded into the database by scripts/seed_exercises.py. The guest store builds its
exercise lookup from it (see app.services.guest_store.builtin_exercises).
"""

from typing import NamedTuple

from app.core.enums import InputType, MuscleGroup


class CatalogExercise(NamedTuple):
    key: str
    name: str
    name_ja: str
    muscle_group: MuscleGroup
    met: float
    input_type: InputType
    description: str = ""


_C, _B, _S, _A, _L, _CO, _F, _CA = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.ARMS,
    MuscleGroup.LEGS,
    MuscleGroup.CORE,
    MuscleGroup.FULL_BODY,
    MuscleGroup.CARDIO,
)
_RW, _RO, _D, _CD = InputType.REPS_WEIGHT, InputType.REPS_ONLY, InputType.DURATION, InputType.CARDIO

EXERCISE_CATALOG: tuple[CatalogExercise, ...] = (
    # Chest
    CatalogExercise("bench-press", "Bench Press", "ベンチプレス", _C, 6.0, _RW, "大胸筋を鍛えるコンパウンド種目"),
    CatalogExercise("incline-press", "Incline Bench Press", "インクラインベンチプレス", _C, 6.0, _RW, "大胸筋上部を鍛える種目"),
    CatalogExercise("decline-press", "Decline Bench Press", "デクラインベンチプレス", _C, 6.0, _RW, "大胸筋下部を鍛える種目"),
    CatalogExercise("dumbbell-fly", "Dumbbell Fly", "ダンベルフライ", _C, 5.0, _RW, "大胸筋のストレッチ系種目"),
    CatalogExercise("incline-fly", "Incline Dumbbell Fly", "インクラインダンベルフライ", _C, 5.0, _RW, "大胸筋上部のストレッチ系種目"),
    CatalogExercise("cable-crossover", "Cable Crossover", "ケーブルクロスオーバー", _C, 4.5, _RW, "大胸筋を収縮させるケーブル種目"),
    CatalogExercise("chest-dip", "Chest Dip", "ディップス（胸）", _C, 5.5, _RO, "大胸筋下部・上腕三頭筋を鍛える自重種目"),
    CatalogExercise("push-up", "Push Up", "腕立て伏せ", _C, 3.8, _RO, "自重で行う胸のトレーニング"),
    CatalogExercise("dumbbell-press", "Dumbbell Bench Press", "ダンベルベンチプレス", _C, 5.5, _RW, "可動域が広いダンベルを使った胸のプレス種目"),

    # Back
    CatalogExercise("deadlift", "Deadlift", "デッドリフト", _B, 6.0, _RW, "後面全体を鍛えるBIG3種目"),
    CatalogExercise("lat-pulldown", "Lat Pulldown", "ラットプルダウン", _B, 5.0, _RW, "広背筋を鍛えるマシン種目"),
    CatalogExercise("barbell-row", "Barbell Row", "バーベルロウ", _B, 5.5, _RW, "広背筋・僧帽筋を鍛える"),
    CatalogExercise("dumbbell-row", "Dumbbell Row", "ダンベルロウ", _B, 5.0, _RW, "片側ずつ広背筋を鍛えるロウ種目"),
    CatalogExercise("seated-cable-row", "Seated Cable Row", "シーテッドケーブルロウ", _B, 4.5, _RW, "広背筋・僧帽筋中部を鍛えるケーブル種目"),
    CatalogExercise("t-bar-row", "T-Bar Row", "Tバーロウ", _B, 5.5, _RW, "背中の厚みを作るコンパウンド種目"),
    CatalogExercise("chin-up", "Chin Up", "懸垂", _B, 5.5, _RO, "自重で行う背中のトレーニング"),
    CatalogExercise("pullover", "Dumbbell Pullover", "ダンベルプルオーバー", _B, 4.0, _RW, "広背筋・大胸筋を鍛えるストレッチ系種目"),
    CatalogExercise("hyperextension", "Hyperextension", "バックエクステンション", _B, 3.5, _RO, "脊柱起立筋・ハムストリングスを鍛える種目"),

    # Shoulders
    CatalogExercise("overhead-press", "Overhead Press", "オーバーヘッドプレス", _S, 5.0, _RW, "三角筋前部を鍛えるコンパウンド種目"),
    CatalogExercise("dumbbell-shoulder-press", "Dumbbell Shoulder Press", "ダンベルショルダープレス", _S, 5.0, _RW, "三角筋全体を鍛えるダンベル種目"),
    CatalogExercise("lateral-raise", "Lateral Raise", "サイドレイズ", _S, 4.0, _RW, "三角筋中部のアイソレーション種目"),
    CatalogExercise("front-raise", "Front Raise", "フロントレイズ", _S, 3.5, _RW, "三角筋前部を鍛えるアイソレーション種目"),
    CatalogExercise("rear-delt-fly", "Rear Delt Fly", "リアデルトフライ", _S, 3.5, _RW, "三角筋後部を鍛えるアイソレーション種目"),
    CatalogExercise("upright-row", "Upright Row", "アップライトロウ", _S, 4.5, _RW, "三角筋中部・僧帽筋を鍛えるコンパウンド種目"),
    CatalogExercise("face-pull", "Face Pull", "フェイスプル", _S, 3.5, _RW, "三角筋後部・僧帽筋下部を鍛える"),
    CatalogExercise("shrug", "Barbell Shrug", "バーベルシュラッグ", _S, 4.0, _RW, "僧帽筋上部を鍛える種目"),

    # Arms
    CatalogExercise("bicep-curl", "Bicep Curl", "バイセプスカール", _A, 3.5, _RW, "上腕二頭筋のアイソレーション種目"),
    CatalogExercise("hammer-curl", "Hammer Curl", "ハンマーカール", _A, 3.5, _RW, "上腕二頭筋・腕橈骨筋を鍛える"),
    CatalogExercise("preacher-curl", "Preacher Curl", "プリーチャーカール", _A, 3.5, _RW, "上腕二頭筋短頭を集中的に鍛える種目"),
    CatalogExercise("concentration-curl", "Concentration Curl", "コンセントレーションカール", _A, 3.0, _RW, "上腕二頭筋のピークを作るアイソレーション種目"),
    CatalogExercise("tricep-pushdown", "Tricep Pushdown", "トライセプスプッシュダウン", _A, 3.5, _RW, "上腕三頭筋のアイソレーション種目"),
    CatalogExercise("skull-crusher", "Skull Crusher", "スカルクラッシャー", _A, 4.0, _RW, "上腕三頭筋を鍛えるバーベル種目"),
    CatalogExercise("tricep-kickback", "Tricep Kickback", "トライセプスキックバック", _A, 3.0, _RW, "上腕三頭筋のアイソレーション種目"),
    CatalogExercise("tricep-overhead-ext", "Tricep Overhead Extension", "トライセプスオーバーヘッドエクステンション", _A, 3.5, _RW, "上腕三頭筋長頭を鍛える種目"),
    CatalogExercise("close-grip-press", "Close Grip Bench Press", "クローズグリップベンチプレス", _A, 5.0, _RW, "上腕三頭筋を重点的に鍛えるプレス種目"),
    CatalogExercise("wrist-curl", "Wrist Curl", "リストカール", _A, 2.5, _RW, "前腕屈筋群を鍛える種目"),

    # Legs
    CatalogExercise("squat", "Barbell Squat", "バーベルスクワット", _L, 6.0, _RW, "下半身全体を鍛えるBIG3種目"),
    CatalogExercise("goblet-squat", "Goblet Squat", "ゴブレットスクワット", _L, 5.5, _RW, "ダンベルを抱えて行う初心者にも◎なスクワット"),
    CatalogExercise("hack-squat", "Hack Squat", "ハックスクワット", _L, 5.5, _RW, "マシンで大腿四頭筋を集中的に鍛える種目"),
    CatalogExercise("leg-press", "Leg Press", "レッグプレス", _L, 5.5, _RW, "大腿四頭筋を鍛えるマシン種目"),
    CatalogExercise("leg-extension", "Leg Extension", "レッグエクステンション", _L, 4.0, _RW, "大腿四頭筋のアイソレーション種目"),
    CatalogExercise("leg-curl", "Leg Curl", "レッグカール", _L, 4.5, _RW, "ハムストリングスを鍛えるマシン種目"),
    CatalogExercise("romanian-deadlift", "Romanian Deadlift", "ルーマニアンデッドリフト", _L, 5.5, _RW, "ハムストリングス・臀部を鍛えるデッドリフト系種目"),
    CatalogExercise("hip-thrust", "Hip Thrust", "ヒップスラスト", _L, 5.0, _RW, "大臀筋を最大収縮で鍛える種目"),
    CatalogExercise("lunge", "Lunge", "ランジ", _L, 5.0, _RW, "片足ずつ下半身を鍛える種目"),
    CatalogExercise("bulgarian-split-squat", "Bulgarian Split Squat", "ブルガリアンスプリットスクワット", _L, 5.5, _RW, "片足スクワットで大腿四頭筋・臀部を強烈に鍛える"),
    CatalogExercise("step-up", "Step Up", "ステップアップ", _L, 5.0, _RO, "台を使った片足のトレーニング"),
    CatalogExercise("calf-raise", "Calf Raise", "カーフレイズ", _L, 3.5, _RW, "ふくらはぎを鍛える種目"),
    CatalogExercise("seated-calf-raise", "Seated Calf Raise", "シーテッドカーフレイズ", _L, 3.0, _RW, "ヒラメ筋を鍛えるカーフレイズ"),
    CatalogExercise("sumo-deadlift", "Sumo Deadlift", "スモウデッドリフト", _L, 6.0, _RW, "内転筋・臀部に効くワイドスタンスのデッドリフト"),

    # Core
    CatalogExercise("plank", "Plank", "プランク", _CO, 3.0, _D, "体幹を安定させる静的トレーニング"),
    CatalogExercise("side-plank", "Side Plank", "サイドプランク", _CO, 3.0, _D, "腹斜筋・体幹側面を鍛える静的種目"),
    CatalogExercise("crunch", "Crunch", "クランチ", _CO, 3.5, _RO, "腹直筋を鍛えるトレーニング"),
    CatalogExercise("leg-raise", "Leg Raise", "レッグレイズ", _CO, 4.0, _RO, "腹直筋下部を鍛える種目"),
    CatalogExercise("hanging-leg-raise", "Hanging Leg Raise", "ハンギングレッグレイズ", _CO, 4.5, _RO, "ぶら下がりながら腹筋下部を鍛える高強度種目"),
    CatalogExercise("russian-twist", "Russian Twist", "ロシアンツイスト", _CO, 3.5, _RO, "腹斜筋を鍛えるツイスト系種目"),
    CatalogExercise("ab-wheel", "Ab Wheel Rollout", "アブローラー", _CO, 4.5, _RO, "腹筋全体を鍛える高強度種目"),
    CatalogExercise("mountain-climber", "Mountain Climber", "マウンテンクライマー", _CO, 8.0, _D, "プランク姿勢から行う全身有酸素系体幹種目"),
    CatalogExercise("cable-crunch", "Cable Crunch", "ケーブルクランチ", _CO, 4.0, _RW, "負荷を調整できるケーブルを使ったクランチ"),
    CatalogExercise("dead-bug", "Dead Bug", "デッドバグ", _CO, 3.0, _D, "腰椎を安定させながら体幹を鍛える種目"),

    # Full body
    CatalogExercise("clean-and-jerk", "Clean and Jerk", "クリーン&ジャーク", _F, 6.5, _RW, "オリンピックリフティング種目"),
    CatalogExercise("snatch", "Snatch", "スナッチ", _F, 7.0, _RW, "オリンピックリフティング・爆発的全身種目"),
    CatalogExercise("burpee", "Burpee", "バーピー", _F, 8.0, _RO, "全身を使う高強度自重トレーニング"),
    CatalogExercise("kettlebell-swing", "Kettlebell Swing", "ケトルベルスイング", _F, 6.0, _RW, "全身の爆発力を鍛える種目"),
    CatalogExercise("turkish-getup", "Turkish Get-Up", "トルコ式ゲットアップ", _F, 5.5, _RW, "全身の安定性と筋持久力を鍛える種目"),
    CatalogExercise("thruster", "Thruster", "スラスター", _F, 7.5, _RW, "スクワット+オーバーヘッドプレスを連続して行う高強度種目"),
    CatalogExercise("man-maker", "Man Maker", "マンメーカー", _F, 8.0, _RW, "ダンベルを使った高強度全身コンビネーション種目"),

    # Cardio (weight_kg holds incline % or resistance level)
    CatalogExercise("treadmill", "Treadmill Running", "トレッドミル", _CA, 8.0, _CD, "ランニングマシンでの有酸素運動。傾斜(%)で強度を調整可"),
    CatalogExercise("cycling", "Stationary Cycling", "エアロバイク", _CA, 6.5, _CD, "自転車マシンでの有酸素運動。負荷レベル(1-10)を入力可"),
    CatalogExercise("rowing", "Rowing Machine", "ローイングマシン", _CA, 7.0, _CD, "ボート漕ぎマシンでの有酸素運動。負荷レベルを入力可"),
    CatalogExercise("jump-rope", "Jump Rope", "縄跳び", _CA, 11.0, _CD, "高強度の有酸素運動"),
    CatalogExercise("stair-climber", "Stair Climber", "ステアクライマー", _CA, 9.0, _CD, "階段昇降マシンでの有酸素運動・下半身強化"),
    CatalogExercise("elliptical", "Elliptical Trainer", "エリプティカル", _CA, 5.0, _CD, "関節への負担が少ない全身有酸素マシン"),
    CatalogExercise("assault-bike", "Assault Bike", "アサルトバイク", _CA, 12.0, _CD, "上下肢を同時に動かす超高強度エアバイク"),
    CatalogExercise("battle-rope", "Battle Rope", "バトルロープ", _CA, 10.0, _CD, "上半身中心の高強度有酸素インターバル種目"),
    CatalogExercise("box-jump", "Box Jump", "ボックスジャンプ", _CA, 8.0, _RO, "台への跳び乗りで爆発力と有酸素能力を鍛える"),
    CatalogExercise("swimming", "Swimming", "水泳", _CA, 7.0, _CD, "全身を使う低衝撃の有酸素運動"),

    # Hammer Strength: chest
    CatalogExercise("hs-chest-press", "HS ISO-Lateral Chest Press", "HSチェストプレス（アイソラテラル）", _C, 5.5, _RW, "左右独立動作で大胸筋を均等に鍛えるプレートローディングマシン"),
    CatalogExercise("hs-incline-press", "HS ISO-Lateral Incline Press", "HSインクラインプレス（アイソラテラル）", _C, 5.5, _RW, "大胸筋上部を左右独立動作で鍛えるインクラインプレス"),
    CatalogExercise("hs-decline-press", "HS ISO-Lateral Decline Press", "HSデクラインプレス（アイソラテラル）", _C, 5.5, _RW, "大胸筋下部を左右独立動作で鍛えるデクラインプレス"),

    # Hammer Strength: back
    CatalogExercise("hs-iso-low-row", "HS ISO-Lateral Low Row", "HSローロウ（アイソラテラル）", _B, 5.0, _RW, "広背筋下部・大円筋を左右独立で鍛えるプレートローディングロウ"),
    CatalogExercise("hs-iso-high-row", "HS ISO-Lateral High Row", "HSハイロウ（アイソラテラル）", _B, 5.0, _RW, "広背筋上部・菱形筋を左右独立で鍛えるハイロウマシン"),
    CatalogExercise("hs-wide-pulldown", "HS ISO-Lateral Wide Pulldown", "HSワイドプルダウン（アイソラテラル）", _B, 5.0, _RW, "広背筋外側を広げるワイドグリッププルダウンマシン"),
    CatalogExercise("hs-front-pulldown", "HS ISO-Lateral Front Lat Pulldown", "HSフロントラットプルダウン（アイソラテラル）", _B, 4.5, _RW, "広背筋全体をプレートで鍛えるフロントプルダウン"),
    CatalogExercise("hs-pull-up", "HS Assisted Pull-Up / Dip", "HSアシストプルアップ・ディップ", _B, 5.0, _RO, "アシスト機能付きで懸垂・ディップスを行うハンマーストレングスマシン"),

    # Hammer Strength: shoulders
    CatalogExercise("hs-shoulder-press", "HS ISO-Lateral Shoulder Press", "HSショルダープレス（アイソラテラル）", _S, 4.5, _RW, "三角筋全体を左右独立動作で鍛えるプレートローディングマシン"),
    CatalogExercise("hs-iso-lateral-raise", "HS Lateral Raise Machine", "HSサイドレイズマシン", _S, 3.5, _RW, "三角筋中部を安定した軌道で鍛えるハンマーストレングスサイドレイズ"),

    # Hammer Strength: arms
    CatalogExercise("hs-preacher-curl", "HS Preacher Curl", "HSプリーチャーカール", _A, 3.5, _RW, "上腕二頭筋短頭を固定軌道で徹底的に鍛えるマシン"),
    CatalogExercise("hs-tricep-press", "HS ISO-Lateral Overhead Tricep Press", "HSトライセプスプレス（アイソラテラル）", _A, 3.5, _RW, "上腕三頭筋長頭を左右独立で鍛えるオーバーヘッドプレスマシン"),

    # Hammer Strength: legs
    CatalogExercise("hs-leg-press", "HS ISO-Lateral Leg Press", "HSレッグプレス（アイソラテラル）", _L, 5.5, _RW, "左右独立動作で大腿四頭筋・臀部を鍛えるプレートローディングマシン"),
    CatalogExercise("hs-leg-curl", "HS Seated Leg Curl", "HSシーテッドレッグカール", _L, 4.5, _RW, "座位でハムストリングスを集中的に鍛えるマシン。ストレッチポジションで負荷が強い"),
    CatalogExercise("hs-prone-leg-curl", "HS Prone Leg Curl", "HSプローンレッグカール（うつ伏せ）", _L, 4.0, _RW, "うつ伏せ姿勢でハムストリングスを鍛える。収縮ポジションで最大負荷がかかる"),
    CatalogExercise("hs-standing-calf", "HS Standing Calf Raise", "HSスタンディングカーフレイズ", _L, 3.5, _RW, "腓腹筋をプレートローディングで鍛えるカーフレイズマシン"),
    CatalogExercise("hs-glute-drive", "HS Glute Drive", "HSグルートドライブ", _L, 5.0, _RW, "大臀筋をヒップスラスト動作でプレートを使って鍛えるマシン"),
)
